"""Parquet persistence helpers for patrol results."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from guard_patrol.config.types import PatrolResult
from guard_patrol.io.paths import candidate_log_path, logs_dir, visited_path_log_path
from guard_patrol.io.schemas import CANDIDATE_SCHEMA, VISITED_PATH_SCHEMA


def write_patrol_logs(result: PatrolResult, out_dir: Path) -> tuple[Path, Path]:
    """Write the visited path and candidate verdicts under ``out_dir/logs``.

    Returns ``(visited_path, candidate_path)``.
    """
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    visited_table = pa.Table.from_pydict(
        {
            "step": list(range(len(result.visited))),
            "x": [x for x, _ in result.visited],
            "y": [y for _, y in result.visited],
        },
        schema=VISITED_PATH_SCHEMA,
    )
    visited_path = visited_path_log_path(out_dir)
    pq.write_table(visited_table, visited_path)

    candidate_table = pa.Table.from_pylist(
        [
            {
                "x": c.x,
                "y": c.y,
                "is_start": c.is_start,
                "creates_loop": c.creates_loop,
            }
            for c in result.candidates
        ],
        schema=CANDIDATE_SCHEMA,
    )
    candidate_path = candidate_log_path(out_dir)
    pq.write_table(candidate_table, candidate_path)
    return visited_path, candidate_path
