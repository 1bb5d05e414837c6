"""CLI entrypoint for solving a patrol map.

This module owns argument parsing, config-file merging and output. All
domain logic lives in the extracted modules:

- ``guard_patrol.domain``            – map model, path tracer, loop detector
- ``guard_patrol.simulation.engine`` – ``run_patrol`` orchestration
- ``guard_patrol.simulation.persistence`` – Parquet logs
- ``guard_patrol.viz``               – text markup and image rendering
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from guard_patrol.config.constants import DEFAULT_WORKERS, INPUT_FILENAME
from guard_patrol.config.types import PatrolConfig
from guard_patrol.domain.floor_map import FloorMapError, load_floor_map
from guard_patrol.domain.path_tracer import PatrolLoopError
from guard_patrol.simulation.engine import run_patrol
from guard_patrol.simulation.persistence import write_patrol_logs
from guard_patrol.viz.markup import render_trace_markup
from guard_patrol.viz.render import render_patrol_map

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Config coercion helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_optional_path(raw: object, key: str) -> Path | None:
    """Coerce raw value to Path; ``None`` passes through."""
    if raw is None:
        return None
    if isinstance(raw, (str, Path)):
        return Path(raw)
    raise ValueError(f"{key} must be a path string")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> PatrolConfig:
    input_path = _coerce_optional_path(
        _get_val(args.input, "input", file_cfg, INPUT_FILENAME), "input"
    )
    return PatrolConfig(
        input_path=input_path if input_path is not None else Path(INPUT_FILENAME),
        workers=_coerce_int(_get_val(args.workers, "workers", file_cfg, DEFAULT_WORKERS), "workers"),
        exclude_start=_coerce_bool(
            _get_val(args.exclude_start, "exclude_start", file_cfg, False), "exclude_start"
        ),
        out_dir=_coerce_optional_path(_get_val(args.out_dir, "out_dir", file_cfg, None), "out_dir"),
        render_path=_coerce_optional_path(
            _get_val(args.render, "render", file_cfg, None), "render"
        ),
        show_markup=_coerce_bool(_get_val(args.markup, "markup", file_cfg, False), "markup"),
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Trace a guard's patrol and count loop obstacles")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help=f"Map file (default: ./{INPUT_FILENAME})",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument(
        "--exclude-start",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Do not try an obstacle on the guard's start cell",
    )
    parser.add_argument("--out-dir", type=Path, default=None, help="Write Parquet logs here")
    parser.add_argument("--render", type=Path, default=None, help="Save a map image here")
    parser.add_argument(
        "--markup",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print the map with the walk drawn on it",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Solve one map and print ``Part 1``, ``Part 2`` and the Part 2 timing.

    Input, config and map errors exit through ``parser.error`` before any
    answer is printed.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except OSError as exc:
            parser.error(f"Cannot read config file {args.config}: {exc}")
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        config = _build_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        floor_map, guard = load_floor_map(config.input_path)
    except OSError as exc:
        parser.error(f"Cannot read map file {config.input_path}: {exc}")
    except FloorMapError as exc:
        parser.error(f"Invalid map file {config.input_path}: {exc}")

    try:
        result = run_patrol(floor_map, guard, config)
    except PatrolLoopError as exc:
        logger.warning("Unmodified map never lets the guard out: %s", exc)
        parser.error(str(exc))

    if config.show_markup:
        print("\n".join(render_trace_markup(floor_map, guard)))
    print(f"Part 1: {result.part1}")
    print(f"Part 2: {result.part2}")
    print(f"Elapsed Part 2: {result.part2_seconds:.2f}s")

    if config.out_dir is not None:
        visited_path, candidate_path = write_patrol_logs(result, config.out_dir)
        logger.debug("Wrote %s and %s", visited_path, candidate_path)
    if config.render_path is not None:
        render_patrol_map(floor_map, guard, result.visited, result.loop_obstacles, config.render_path)
        logger.debug("Rendered map to %s", config.render_path)


if __name__ == "__main__":
    main()
