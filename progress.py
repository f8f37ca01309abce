# progress.py
"""
Progress evaluation and the (stub) progress store.

There is no persistence: every snapshot is synthesized from the single incoming
event, and reads return an empty default. Achievements are derived from that
one event only, so nothing is de-duplicated against earlier awards.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Callable, List, NamedTuple, Optional, Protocol

from config import DEMO_USER_ID
from schemas.progress import (
    Achievement,
    CompletedSimulation,
    CurrentSimulation,
    ProgressEvent,
    ProgressSnapshot,
)

logger = logging.getLogger("physics-tutorial.progress")

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(UTC)


# --- Achievement rules -------------------------------------------------------------

HIGH_SCORE_THRESHOLD = 90.0


class AchievementRule(NamedTuple):
    id: str
    name: str
    description: str
    icon: str
    applies: Callable[[ProgressEvent], bool]

    def evaluate(self, event: ProgressEvent, now: datetime) -> Optional[Achievement]:
        if not self.applies(event):
            return None
        return Achievement(
            id=self.id,
            name=self.name,
            description=self.description,
            icon=self.icon,
            earned_at=now,
        )


# Output order follows list order: first-experiment before quantum-master.
ACHIEVEMENT_RULES: List[AchievementRule] = [
    AchievementRule(
        id="first-experiment",
        name="First Experiment",
        description="Completed your first quantum physics simulation",
        icon="🔬",
        applies=lambda e: e.completed,
    ),
    AchievementRule(
        id="quantum-master",
        name="Quantum Master",
        description="Achieved a score of 90% or higher",
        icon="🏆",
        # independent of `completed`: an in-progress attempt can earn it
        applies=lambda e: e.score is not None and e.score >= HIGH_SCORE_THRESHOLD,
    ),
]


def check_achievements(event: ProgressEvent, now: Optional[datetime] = None) -> List[Achievement]:
    now = now or utcnow()
    unlocked = (rule.evaluate(event, now) for rule in ACHIEVEMENT_RULES)
    return [a for a in unlocked if a is not None]


# --- Evaluator ---------------------------------------------------------------------


class ProgressEvaluator:
    def __init__(self, clock: Clock = utcnow):
        self._clock = clock

    def default(self, user_id: str = DEMO_USER_ID) -> ProgressSnapshot:
        return ProgressSnapshot(user_id=user_id, last_activity=self._clock())

    def save(self, event: ProgressEvent, user_id: str = DEMO_USER_ID) -> ProgressSnapshot:
        self._emit_saved(event)
        now = self._clock()

        completed: List[CompletedSimulation] = []
        current: Optional[CurrentSimulation] = None
        if event.completed:
            completed.append(
                CompletedSimulation(
                    simulation_id=event.simulation_id,
                    completed_at=now,
                    score=event.score,
                    time_spent_minutes=event.time_spent_minutes,
                )
            )
        else:
            current = CurrentSimulation(
                simulation_id=event.simulation_id,
                started_at=now,
                last_parameters=event.parameters,
            )

        return ProgressSnapshot(
            user_id=user_id,
            completed_simulations=completed,
            current_simulation=current,
            # the single event's time; nothing accumulates without a store
            total_time_minutes=event.time_spent_minutes,
            achievements=check_achievements(event, now),
            last_activity=now,
        )

    @staticmethod
    def _emit_saved(event: ProgressEvent) -> None:
        logger.info(
            "Saving progress: simulation=%s, completed=%s",
            event.simulation_id,
            event.completed,
            extra={"simulation_id": event.simulation_id, "completed": event.completed},
        )


# --- Store -------------------------------------------------------------------------


class ProgressStore(Protocol):
    def load(self, user_id: str) -> ProgressSnapshot: ...

    def save(self, user_id: str, event: ProgressEvent) -> ProgressSnapshot: ...


class StatelessProgressStore:
    """
    No-op store: nothing is written anywhere.
      - load() always returns the empty default snapshot
      - save() recomputes a snapshot from the given event alone
    A real store would accumulate history here without touching ProgressEvaluator.
    """

    def __init__(self, evaluator: Optional[ProgressEvaluator] = None):
        self.evaluator = evaluator or ProgressEvaluator()

    def load(self, user_id: str) -> ProgressSnapshot:
        return self.evaluator.default(user_id)

    def save(self, user_id: str, event: ProgressEvent) -> ProgressSnapshot:
        return self.evaluator.save(event, user_id)


_store: ProgressStore = StatelessProgressStore()


def get_progress_store() -> ProgressStore:
    return _store
