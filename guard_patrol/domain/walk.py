"""Single-step movement rule shared by the path tracer and loop detector."""

from __future__ import annotations

from enum import Enum

from guard_patrol.domain.floor_map import FloorMap, Guard


class StepOutcome(Enum):
    """What happened when the guard tried to step forward."""

    MOVED = "moved"
    BLOCKED = "blocked"
    EXITED = "exited"


def advance(floor_map: FloorMap, guard: Guard) -> StepOutcome:
    """Try one step forward.

    On ``MOVED`` the guard now stands on the next cell. ``BLOCKED`` and
    ``EXITED`` leave the guard unchanged; turning is the caller's job so
    it can inspect the pre-turn state first.
    """
    next_x, next_y = guard.ahead()
    if not floor_map.in_bounds(next_x, next_y):
        return StepOutcome.EXITED
    if floor_map.is_wall(next_x, next_y):
        return StepOutcome.BLOCKED
    guard.x = next_x
    guard.y = next_y
    return StepOutcome.MOVED
