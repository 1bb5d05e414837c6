"""Plain-text rendering of the guard's walk.

Cells are marked on first entry with ``|`` (vertical travel) or ``-``
(horizontal travel); a cell where the guard turned is overwritten with
``+``. The start marker stays until the guard turns on it.
"""

from __future__ import annotations

from guard_patrol.config.constants import HORIZONTAL_MARK, TURN_MARK, VERTICAL_MARK
from guard_patrol.domain.floor_map import Direction, FloorMap, Guard
from guard_patrol.domain.loop_detector import TurnStateDetector
from guard_patrol.domain.path_tracer import PatrolLoopError
from guard_patrol.domain.walk import StepOutcome, advance


def _mark(rows: list[list[str]], x: int, y: int, glyph: str) -> None:
    row = rows[y]
    if x < len(row):
        row[x] = glyph


def render_trace_markup(floor_map: FloorMap, guard: Guard) -> list[str]:
    """Replay the walk on a copy of the map rows and return the marked rows."""
    rows = [list(line) for line in floor_map.rows]
    walker = guard.copy()
    seen = {walker.position}
    detector = TurnStateDetector()
    while True:
        outcome = advance(floor_map, walker)
        if outcome is StepOutcome.EXITED:
            return ["".join(row) for row in rows]
        if outcome is StepOutcome.MOVED:
            if walker.position not in seen:
                seen.add(walker.position)
                vertical = walker.direction in (Direction.UP, Direction.DOWN)
                _mark(rows, walker.x, walker.y, VERTICAL_MARK if vertical else HORIZONTAL_MARK)
            continue
        if detector.observe(walker.state):
            raise PatrolLoopError("guard is trapped; walk has no end to render")
        walker.turn()
        _mark(rows, walker.x, walker.y, TURN_MARK)
