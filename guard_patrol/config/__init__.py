"""Configuration layer: constants and typed config dataclasses."""

from guard_patrol.config.constants import (
    DEFAULT_WORKERS,
    GUARD_MARKERS,
    HORIZONTAL_MARK,
    INPUT_FILENAME,
    TURN_MARK,
    VERTICAL_MARK,
    WALL_CHAR,
)
from guard_patrol.config.types import CandidateResult, PatrolConfig, PatrolResult

__all__ = [
    "CandidateResult",
    "DEFAULT_WORKERS",
    "GUARD_MARKERS",
    "HORIZONTAL_MARK",
    "INPUT_FILENAME",
    "PatrolConfig",
    "PatrolResult",
    "TURN_MARK",
    "VERTICAL_MARK",
    "WALL_CHAR",
]
