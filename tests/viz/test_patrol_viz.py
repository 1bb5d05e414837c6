"""Tests for text markup and image rendering of a patrol."""

from __future__ import annotations

from pathlib import Path

import pytest

from guard_patrol.domain.floor_map import FloorMap, Guard, parse_floor_map
from guard_patrol.domain.path_tracer import PatrolLoopError
from guard_patrol.simulation.engine import run_patrol
from guard_patrol.viz.markup import render_trace_markup
from guard_patrol.viz.render import (
    FLOOR,
    LOOP_OBSTACLE,
    START,
    VISITED,
    WALL,
    build_cell_grid,
    render_patrol_map,
)


class TestRenderTraceMarkup:
    def test_marks_moves_and_turns(self) -> None:
        floor_map, guard = parse_floor_map("..#..\n.....\n..^..\n.....")
        assert render_trace_markup(floor_map, guard) == [
            "..#..",
            "..+--",
            "..^..",
            ".....",
        ]

    def test_source_rows_untouched(self, example: tuple[FloorMap, Guard]) -> None:
        floor_map, guard = example
        rows_before = floor_map.rows
        render_trace_markup(floor_map, guard)
        assert floor_map.rows == rows_before

    def test_example_keeps_shape_and_walls(self, example: tuple[FloorMap, Guard]) -> None:
        floor_map, guard = example
        marked = render_trace_markup(floor_map, guard)
        assert len(marked) == len(floor_map.rows)
        assert [len(row) for row in marked] == [len(row) for row in floor_map.rows]
        assert marked[0][4] == "#"
        assert marked[6][4] == "^"
        assert marked[5][4] == "|"

    def test_trapped_guard_raises(self) -> None:
        floor_map, guard = parse_floor_map(".#.\n#^#\n.#.")
        with pytest.raises(PatrolLoopError):
            render_trace_markup(floor_map, guard)


class TestRenderPatrolMap:
    def test_cell_grid_layers(self, example: tuple[FloorMap, Guard]) -> None:
        floor_map, guard = example
        result = run_patrol(floor_map, guard)
        grid = build_cell_grid(floor_map, guard, result.visited, result.loop_obstacles)
        assert grid.shape == (10, 10)
        assert grid[0, 4] == WALL
        assert grid[6, 4] == START
        assert grid[6, 3] == LOOP_OBSTACLE
        assert grid[5, 4] == VISITED
        assert grid[0, 0] == FLOOR

    def test_writes_image(self, tmp_path: Path, example: tuple[FloorMap, Guard]) -> None:
        floor_map, guard = example
        result = run_patrol(floor_map, guard)
        output = render_patrol_map(
            floor_map,
            guard,
            result.visited,
            result.loop_obstacles,
            tmp_path / "plots" / "patrol.png",
        )
        assert output.exists()
        assert output.stat().st_size > 0
