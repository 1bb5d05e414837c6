"""Trace the guard's walk on an unmodified map."""

from __future__ import annotations

from guard_patrol.domain.floor_map import Cell, FloorMap, Guard
from guard_patrol.domain.loop_detector import TurnStateDetector
from guard_patrol.domain.walk import StepOutcome, advance


class PatrolLoopError(RuntimeError):
    """Raised when the guard can never leave the map it is traced on."""


def trace_path(floor_map: FloorMap, guard: Guard) -> list[Cell]:
    """Return distinct cells visited before exiting, in first-visit order.

    The start cell is always the first entry. Raises :exc:`PatrolLoopError`
    if the map itself traps the guard.
    """
    walker = guard.copy()
    visited: dict[Cell, None] = {walker.position: None}
    detector = TurnStateDetector()
    while True:
        outcome = advance(floor_map, walker)
        if outcome is StepOutcome.EXITED:
            return list(visited)
        if outcome is StepOutcome.MOVED:
            visited.setdefault(walker.position, None)
            continue
        if detector.observe(walker.state):
            raise PatrolLoopError(
                f"guard is trapped: turn at ({walker.x}, {walker.y}) "
                f"facing {walker.direction.name} repeats"
            )
        walker.turn()
