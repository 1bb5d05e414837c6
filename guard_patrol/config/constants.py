"""Centralized constants for the guard patrol simulation.

Map characters, CLI defaults and markup glyphs live here so the parser,
the renderers and the CLI agree on a single vocabulary.
"""

from __future__ import annotations

INPUT_FILENAME = "floor.txt"
"""Default input map, resolved against the process working directory."""

WALL_CHAR = "#"
"""Map character marking an impassable cell."""

GUARD_MARKERS: tuple[str, ...] = ("^", "v", "<", ">")
"""Guard start markers, in UP, DOWN, LEFT, RIGHT order."""

DEFAULT_WORKERS = 1
"""Number of processes used for loop-obstacle search (1 = sequential)."""

VERTICAL_MARK = "|"
"""Markup glyph for a cell first entered while travelling up or down."""

HORIZONTAL_MARK = "-"
"""Markup glyph for a cell first entered while travelling left or right."""

TURN_MARK = "+"
"""Markup glyph for a cell where the guard turned."""
