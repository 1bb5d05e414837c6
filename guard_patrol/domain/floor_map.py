"""Floor map and guard model, plus the text parser that builds them.

Bounds convention: ``width`` and ``height`` hold the maximum valid index,
not the cell count. A coordinate is off the map when it is negative or
strictly greater than the matching bound.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

import numpy as np

from guard_patrol.config.constants import GUARD_MARKERS, WALL_CHAR

Cell = tuple[int, int]
TurnState = tuple[int, int, "Direction"]


class FloorMapError(ValueError):
    """Raised when map text cannot describe a patrol."""


class EmptyMapError(FloorMapError):
    """Raised for input with no rows."""


class MissingGuardError(FloorMapError):
    """Raised when no guard marker appears in the map."""


class Direction(Enum):
    """Guard facing. Values are the map markers."""

    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    @classmethod
    def from_marker(cls, marker: str) -> Direction:
        try:
            return cls(marker)
        except ValueError as exc:
            valid = ", ".join(GUARD_MARKERS)
            raise ValueError(f"guard marker must be one of {valid}") from exc

    @property
    def delta(self) -> Cell:
        """Unit step as ``(dx, dy)``; y grows downward."""
        return _DELTAS[self]

    def turn_clockwise(self) -> Direction:
        return _CLOCKWISE[self]


_DELTAS: dict[Direction, Cell] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_CLOCKWISE: dict[Direction, Direction] = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


@dataclass
class Guard:
    """Mutable simulation state: position and facing."""

    x: int
    y: int
    direction: Direction

    @property
    def position(self) -> Cell:
        return (self.x, self.y)

    @property
    def state(self) -> TurnState:
        """Loop-detection key ``(x, y, direction)``."""
        return (self.x, self.y, self.direction)

    def ahead(self) -> Cell:
        """Cell one step forward in the current facing."""
        dx, dy = self.direction.delta
        return (self.x + dx, self.y + dy)

    def turn(self) -> None:
        """Rotate 90 degrees clockwise in place."""
        self.direction = self.direction.turn_clockwise()

    def copy(self) -> Guard:
        return replace(self)


@dataclass(frozen=True)
class FloorMap:
    """Immutable grid description with a wall set."""

    width: int
    height: int
    rows: tuple[str, ...]
    walls: frozenset[Cell]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x <= self.width and 0 <= y <= self.height

    def is_wall(self, x: int, y: int) -> bool:
        return (x, y) in self.walls

    def with_wall(self, x: int, y: int) -> FloorMap:
        """Return a copy of this map with one extra wall at ``(x, y)``.

        The receiver is left untouched, so each candidate run owns its map.
        """
        if not self.in_bounds(x, y):
            raise ValueError(f"wall ({x}, {y}) lies outside the map")
        return replace(self, walls=self.walls | {(x, y)})

    def wall_mask(self) -> np.ndarray:
        """Return ``(height + 1, width + 1)`` bool array, True on walls."""
        mask = np.zeros((self.height + 1, self.width + 1), dtype=bool)
        for x, y in self.walls:
            mask[y, x] = True
        return mask


def parse_floor_map(text: str) -> tuple[FloorMap, Guard]:
    """Parse map text into a ``FloorMap`` and the guard's start state.

    Raises :exc:`EmptyMapError` for empty text and :exc:`MissingGuardError`
    when no ``^ v < >`` marker is present. With several markers the last
    one read (row-major) wins.
    """
    lines = text.splitlines()
    if not lines or not lines[0]:
        raise EmptyMapError("map is empty")

    guard: Guard | None = None
    walls: set[Cell] = set()
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char in GUARD_MARKERS:
                guard = Guard(x=x, y=y, direction=Direction.from_marker(char))
            elif char == WALL_CHAR:
                walls.add((x, y))

    if guard is None:
        raise MissingGuardError("no guard found on map")

    floor_map = FloorMap(
        width=len(lines[0]) - 1,
        height=len(lines) - 1,
        rows=tuple(lines),
        walls=frozenset(walls),
    )
    return floor_map, guard


def load_floor_map(path: Path) -> tuple[FloorMap, Guard]:
    """Read and parse a map file.

    ``OSError`` propagates to the caller; undecodable bytes raise
    :exc:`FloorMapError`.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FloorMapError(f"map is not valid UTF-8: {exc}") from exc
    return parse_floor_map(text)
