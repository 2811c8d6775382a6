from dataclasses import dataclass
from typing import Iterable
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from repositories import MealRepository

logger = logging.getLogger("dailydiet.metrics")


@dataclass(frozen=True)
class StreakSummary:
    """Longest run of in-diet meals, and the run still open at the last meal"""

    best: int = 0
    current: int = 0


@dataclass(frozen=True)
class MealMetrics:
    meals_count: int
    in_diet: int
    out_diet: int
    streak: StreakSummary


def compute_streaks(flags: Iterable[bool]) -> StreakSummary:
    """
    Scan diet flags in ascending ``ate_at`` order.

    Each in-diet meal extends the running streak and any other meal resets it
    to zero; ``best`` is the maximum the running streak ever reached.

    >>> compute_streaks([True, True, False, True])
    StreakSummary(best=2, current=1)
    """
    best = 0
    current = 0
    for is_diet in flags:
        current = current + 1 if is_diet else 0
        if current > best:
            best = current
    return StreakSummary(best=best, current=current)


class MetricsService:
    """Summary statistics over a user's meals"""

    @staticmethod
    def summarize(db: Session, user_id: UUID) -> MealMetrics:
        repo = MealRepository(db)
        meals = repo.list_for_user_by_ate_at(user_id)
        metrics = MealMetrics(
            meals_count=repo.count_for_user(user_id),
            in_diet=repo.count_for_user(user_id, is_diet=True),
            out_diet=repo.count_for_user(user_id, is_diet=False),
            streak=compute_streaks(bool(meal.is_diet) for meal in meals),
        )
        logger.info(
            f"metrics_computed user_id={user_id} meals={metrics.meals_count} "
            f"in_diet={metrics.in_diet} best_streak={metrics.streak.best}"
        )
        return metrics
