"""Visualization: text markup of the walk and matplotlib map rendering."""

from guard_patrol.viz.markup import render_trace_markup
from guard_patrol.viz.render import build_cell_grid, render_patrol_map

__all__ = [
    "build_cell_grid",
    "render_patrol_map",
    "render_trace_markup",
]
