"""Patrol engine: trace the walk, then test every visited cell as an obstacle."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from multiprocessing.pool import Pool

from guard_patrol.config.types import CandidateResult, PatrolConfig, PatrolResult
from guard_patrol.domain.floor_map import Cell, FloorMap, Guard
from guard_patrol.domain.loop_detector import has_loop
from guard_patrol.domain.path_tracer import trace_path

logger = logging.getLogger(__name__)


def _check_candidate(task: tuple[FloorMap, Guard, Cell]) -> bool:
    """Pool worker: does one extra wall at *cell* trap the guard?"""
    floor_map, guard, (x, y) = task
    return has_loop(floor_map.with_wall(x, y), guard.copy())


def evaluate_candidates(
    floor_map: FloorMap,
    guard: Guard,
    candidates: Sequence[Cell],
    workers: int = 1,
) -> list[bool]:
    """Return one loop verdict per candidate, in candidate order.

    Each run gets its own map copy, so ``workers > 1`` only needs a
    reduction over the results.
    """
    if workers < 1:
        raise ValueError("workers must be >= 1")
    tasks = [(floor_map, guard, cell) for cell in candidates]
    if workers == 1 or len(tasks) < 2:
        logger.debug("Evaluating %d candidates sequentially", len(tasks))
        return [_check_candidate(task) for task in tasks]

    logger.debug("Evaluating %d candidates over %d processes", len(tasks), workers)
    chunksize = max(1, len(tasks) // (workers * 4))
    with Pool(processes=workers) as pool:
        return pool.map(_check_candidate, tasks, chunksize=chunksize)


def find_loop_obstacles(
    floor_map: FloorMap,
    guard: Guard,
    candidates: Sequence[Cell],
    workers: int = 1,
) -> list[Cell]:
    """Return the candidates whose extra wall produces a loop."""
    verdicts = evaluate_candidates(floor_map, guard, candidates, workers=workers)
    return [cell for cell, loops in zip(candidates, verdicts, strict=True) if loops]


def run_patrol(
    floor_map: FloorMap,
    guard: Guard,
    config: PatrolConfig | None = None,
) -> PatrolResult:
    """Solve both parts for one map.

    Part 1 is the visited path on the unmodified map. Part 2 tries a wall
    on every visited cell, the start cell included unless
    ``config.exclude_start`` is set.
    """
    patrol_config = config or PatrolConfig()

    visited = trace_path(floor_map, guard)
    start = guard.position
    candidates = [
        cell for cell in visited if not (patrol_config.exclude_start and cell == start)
    ]
    logger.debug("Visited %d cells; %d obstacle candidates", len(visited), len(candidates))

    began = time.perf_counter()
    verdicts = evaluate_candidates(floor_map, guard, candidates, workers=patrol_config.workers)
    elapsed = time.perf_counter() - began

    candidate_results = [
        CandidateResult(x=x, y=y, is_start=(x, y) == start, creates_loop=loops)
        for (x, y), loops in zip(candidates, verdicts, strict=True)
    ]
    return PatrolResult(
        visited=visited,
        loop_obstacles=[(c.x, c.y) for c in candidate_results if c.creates_loop],
        part2_seconds=elapsed,
        candidates=candidate_results,
    )
