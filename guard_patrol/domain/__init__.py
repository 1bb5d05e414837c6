"""Domain layer: floor map model, walk rule, path tracer and loop detector."""

from guard_patrol.domain.floor_map import (
    Direction,
    EmptyMapError,
    FloorMap,
    FloorMapError,
    Guard,
    MissingGuardError,
    load_floor_map,
    parse_floor_map,
)
from guard_patrol.domain.loop_detector import TurnStateDetector, has_loop
from guard_patrol.domain.path_tracer import PatrolLoopError, trace_path
from guard_patrol.domain.walk import StepOutcome, advance

__all__ = [
    "Direction",
    "EmptyMapError",
    "FloorMap",
    "FloorMapError",
    "Guard",
    "MissingGuardError",
    "PatrolLoopError",
    "StepOutcome",
    "TurnStateDetector",
    "advance",
    "has_loop",
    "load_floor_map",
    "parse_floor_map",
    "trace_path",
]
