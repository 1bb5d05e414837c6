"""Matplotlib rendering of a solved patrol map."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from guard_patrol.domain.floor_map import Cell, FloorMap, Guard

FLOOR, WALL, VISITED, LOOP_OBSTACLE, START = range(5)

CELL_LABELS: tuple[str, ...] = ("Floor", "Wall", "Visited", "Loop obstacle", "Start")
CELL_COLORS: tuple[str, ...] = ("#f5f5f5", "#2f2f2f", "#8ecae6", "#e63946", "#ffb703")
GRID_LINE_COLOR = "#d0d0d0"


def build_cell_grid(
    floor_map: FloorMap,
    guard: Guard,
    visited: Sequence[Cell],
    loop_obstacles: Sequence[Cell] = (),
) -> np.ndarray:
    """Return ``(H, W)`` int array of cell classes.

    Later layers win: walls, then visited, then loop obstacles, then start.
    """
    grid = np.full((floor_map.height + 1, floor_map.width + 1), FLOOR, dtype=int)
    grid[floor_map.wall_mask()] = WALL
    for x, y in visited:
        grid[y, x] = VISITED
    for x, y in loop_obstacles:
        grid[y, x] = LOOP_OBSTACLE
    grid[guard.y, guard.x] = START
    return grid


def _cell_cmap() -> tuple[ListedColormap, BoundaryNorm]:
    cmap = ListedColormap(list(CELL_COLORS))
    norm = BoundaryNorm([i - 0.5 for i in range(len(CELL_COLORS) + 1)], cmap.N)
    return cmap, norm


def render_patrol_map(
    floor_map: FloorMap,
    guard: Guard,
    visited: Sequence[Cell],
    loop_obstacles: Sequence[Cell],
    output_path: Path,
) -> Path:
    """Draw walls, the visited path and loop obstacles; save as an image."""
    grid = build_cell_grid(floor_map, guard, visited, loop_obstacles)
    h, w = grid.shape
    scale = max(4.0, min(12.0, max(w, h) / 10))
    fig, ax = plt.subplots(figsize=(scale, scale * h / w))
    cmap, norm = _cell_cmap()
    ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    if max(w, h) <= 60:
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(f"Visited: {len(visited)}   Loop obstacles: {len(loop_obstacles)}", fontsize=10)

    handles = [
        Patch(facecolor=color, edgecolor="gray", label=label)
        for label, color in zip(CELL_LABELS, CELL_COLORS, strict=True)
    ]
    fig.legend(handles=handles, loc="lower center", ncol=len(handles), fontsize=8, frameon=False)
    fig.tight_layout(rect=(0, 0.06, 1, 1))

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
