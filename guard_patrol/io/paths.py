"""Path construction helpers for patrol output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def visited_path_log_path(out_dir: Path) -> Path:
    """Return path to the visited-path Parquet file."""
    return logs_dir(out_dir) / "visited_path.parquet"


def candidate_log_path(out_dir: Path) -> Path:
    """Return path to the candidate verdict Parquet file."""
    return logs_dir(out_dir) / "candidate_log.parquet"
