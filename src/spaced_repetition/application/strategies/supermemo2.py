"""
SuperMemo 2 review strategy.

Implements the SM-2 algorithm described at
http://www.supermemo.com/english/ol/sm2.htm, adapted to a 0-100 difficulty
percentage and a three-grade outcome scale:

1. The first correct answer schedules the next review 6 days out.
2. Later intervals grow with the gap between the last two correct reviews,
   scaled by the easiness factor.
3. Each outcome nudges the easiness factor, and therefore the difficulty.
"""

import logging
from datetime import datetime, timedelta

from spaced_repetition.domain.constants import (
    EASINESS_INTERCEPT,
    EASINESS_SLOPE,
    SECOND_INTERVAL_DAYS,
)
from spaced_repetition.domain.errors import InvalidReviewItemError
from spaced_repetition.domain.models import DifficultyRating, Reviewable, ReviewOutcome
from spaced_repetition.domain.ports import Clock, ReviewStrategy
from spaced_repetition.infrastructure.clock import SystemClock

logger = logging.getLogger(__name__)

_MAX_QUALITY = max(ReviewOutcome).quality


class SuperMemo2ReviewStrategy(ReviewStrategy):
    """Schedules reviews with the SM-2 interval and easiness rules."""

    def __init__(self, clock: Clock | None = None):
        self._clock = clock or SystemClock()

    def next_review(self, item: Reviewable) -> datetime:
        if item is None:
            raise InvalidReviewItemError("next_review")

        if item.correct_review_streak == 0:
            return self._clock.now()
        if item.correct_review_streak == 1:
            return item.review_date + timedelta(days=SECOND_INTERVAL_DAYS)

        easiness = self.difficulty_to_easiness(item.difficulty_rating.percentage)
        days_since_previous = _whole_days(item.review_date - item.previous_correct_review)
        interval = (days_since_previous - 1) * easiness
        logger.debug(
            f"SM-2 interval {interval:.2f}d (gap={days_since_previous}d, ef={easiness:.3f})"
        )
        return item.review_date + timedelta(days=interval)

    def adjust_difficulty(self, item: Reviewable, outcome: ReviewOutcome) -> DifficultyRating:
        """
        Apply the SM-2 easiness update for the given outcome.

        EF' = EF + (0.1 - (3 - q) * (0.08 + (3 - q) * 0.02)), where q is the
        outcome's quality on the 1-3 scale. The resulting difficulty saturates
        at 0 and 100.
        """
        if item is None:
            raise InvalidReviewItemError("adjust_difficulty")

        penalty = _MAX_QUALITY - ReviewOutcome(outcome).quality
        easiness = self.difficulty_to_easiness(item.difficulty_rating.percentage)
        new_easiness = easiness + (0.1 - penalty * (0.08 + penalty * 0.02))
        return DifficultyRating.clamped(self.easiness_to_difficulty(new_easiness))

    @staticmethod
    def difficulty_to_easiness(difficulty: int) -> float:
        # y = mx + b
        return (EASINESS_SLOPE * difficulty) + EASINESS_INTERCEPT

    @staticmethod
    def easiness_to_difficulty(easiness: float) -> int:
        # x = (y - b) / m, truncated toward zero
        return int((easiness - EASINESS_INTERCEPT) / EASINESS_SLOPE)


def _whole_days(delta: timedelta) -> int:
    """Whole days in a timedelta, truncated toward zero."""
    if delta < timedelta(0):
        return -(-delta).days
    return delta.days
