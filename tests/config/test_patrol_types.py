from pathlib import Path

import pytest

from guard_patrol.config.types import CandidateResult, PatrolConfig, PatrolResult


def test_patrol_config_defaults() -> None:
    config = PatrolConfig()
    assert config.input_path == Path("floor.txt")
    assert config.workers == 1
    assert config.exclude_start is False
    assert config.out_dir is None
    assert config.render_path is None


def test_patrol_config_rejects_zero_workers() -> None:
    with pytest.raises(ValueError, match="workers must be >= 1"):
        PatrolConfig(workers=0)


def test_patrol_result_counts() -> None:
    result = PatrolResult(
        visited=[(0, 0), (0, 1), (0, 2)],
        loop_obstacles=[(0, 1)],
        part2_seconds=0.0,
        candidates=[CandidateResult(x=0, y=1, is_start=False, creates_loop=True)],
    )
    assert result.part1 == 3
    assert result.part2 == 1
