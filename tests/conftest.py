"""Shared map fixtures."""

from __future__ import annotations

import pytest

from guard_patrol.domain.floor_map import FloorMap, Guard, parse_floor_map

EXAMPLE_MAP = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

EXAMPLE_LOOP_OBSTACLES = {(3, 6), (6, 7), (7, 7), (1, 8), (3, 8), (7, 9)}

# Walls around a closed turn cycle; the guard never gets out.
TRAPPED_MAP = """\
.#..
.^.#
#...
..#.
"""


@pytest.fixture
def example_text() -> str:
    return EXAMPLE_MAP


@pytest.fixture
def example(example_text: str) -> tuple[FloorMap, Guard]:
    return parse_floor_map(example_text)


@pytest.fixture
def trapped() -> tuple[FloorMap, Guard]:
    return parse_floor_map(TRAPPED_MAP)


@pytest.fixture
def example_loop_obstacles() -> set[tuple[int, int]]:
    return set(EXAMPLE_LOOP_OBSTACLES)
