"""Loop detection over turn-states.

Only blocked steps are recorded. There are at most ``4 * cells`` distinct
``(x, y, direction)`` triples, so a walk either exits or repeats one
within that many turn events.
"""

from __future__ import annotations

from guard_patrol.domain.floor_map import FloorMap, Guard, TurnState
from guard_patrol.domain.walk import StepOutcome, advance


class TurnStateDetector:
    """Detect the first repeated turn-state."""

    def __init__(self) -> None:
        self._seen: set[TurnState] = set()

    @property
    def turn_events(self) -> int:
        return len(self._seen)

    def observe(self, state: TurnState) -> bool:
        """Record *state*; return True if it was already recorded."""
        if state in self._seen:
            return True
        self._seen.add(state)
        return False


def has_loop(
    floor_map: FloorMap, guard: Guard, detector: TurnStateDetector | None = None
) -> bool:
    """Return True if the guard never leaves *floor_map*.

    The caller's guard is copied, not mutated. Pass *detector* to inspect
    the recorded turn-states afterwards.
    """
    walker = guard.copy()
    detector = detector if detector is not None else TurnStateDetector()
    while True:
        outcome = advance(floor_map, walker)
        if outcome is StepOutcome.EXITED:
            return False
        if outcome is StepOutcome.BLOCKED:
            if detector.observe(walker.state):
                return True
            walker.turn()
