"""Tests for the single-step walk rule."""

from __future__ import annotations

from guard_patrol.domain.floor_map import Direction, Guard, parse_floor_map
from guard_patrol.domain.walk import StepOutcome, advance


def test_move_into_open_cell() -> None:
    floor_map, guard = parse_floor_map("...\n.^.\n...")
    assert advance(floor_map, guard) is StepOutcome.MOVED
    assert guard.state == (1, 0, Direction.UP)


def test_blocked_leaves_guard_unchanged() -> None:
    floor_map, guard = parse_floor_map(".#.\n.^.\n...")
    assert advance(floor_map, guard) is StepOutcome.BLOCKED
    assert guard.state == (1, 1, Direction.UP)


def test_exit_leaves_guard_unchanged() -> None:
    floor_map, guard = parse_floor_map(".^.\n...")
    assert advance(floor_map, guard) is StepOutcome.EXITED
    assert guard.state == (1, 0, Direction.UP)


def test_last_index_is_in_bounds() -> None:
    floor_map, _ = parse_floor_map("^..\n...")
    guard = Guard(x=1, y=0, direction=Direction.RIGHT)
    assert advance(floor_map, guard) is StepOutcome.MOVED
    assert guard.position == (2, 0)
    assert advance(floor_map, guard) is StepOutcome.EXITED
