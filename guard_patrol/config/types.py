"""Configuration and result dataclasses for patrol runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from guard_patrol.config.constants import DEFAULT_WORKERS, INPUT_FILENAME

if TYPE_CHECKING:
    from guard_patrol.domain.floor_map import Cell

__all__ = [
    "CandidateResult",
    "PatrolConfig",
    "PatrolResult",
]


@dataclass(frozen=True)
class PatrolConfig:
    """Runtime knobs for one patrol solve."""

    input_path: Path = Path(INPUT_FILENAME)
    workers: int = DEFAULT_WORKERS
    exclude_start: bool = False
    out_dir: Path | None = None
    render_path: Path | None = None
    show_markup: bool = False

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError("workers must be >= 1")


@dataclass(frozen=True)
class CandidateResult:
    """Loop verdict for one extra-wall placement."""

    x: int
    y: int
    is_start: bool
    creates_loop: bool


@dataclass(frozen=True)
class PatrolResult:
    """Answers for one map: the visited path and the loop-inducing obstacles."""

    visited: list[Cell]
    loop_obstacles: list[Cell]
    part2_seconds: float
    candidates: list[CandidateResult] = field(default_factory=list)

    @property
    def part1(self) -> int:
        return len(self.visited)

    @property
    def part2(self) -> int:
        return len(self.loop_obstacles)
