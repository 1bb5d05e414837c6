"""Simulation engine: patrol orchestration and Parquet persistence."""

from guard_patrol.simulation.engine import evaluate_candidates, find_loop_obstacles, run_patrol
from guard_patrol.simulation.persistence import write_patrol_logs

__all__ = [
    "evaluate_candidates",
    "find_loop_obstacles",
    "run_patrol",
    "write_patrol_logs",
]
