"""Minimal review strategy: every review makes the item the easiest."""

from datetime import datetime

from spaced_repetition.domain.errors import InvalidReviewItemError
from spaced_repetition.domain.models import DifficultyRating, Reviewable, ReviewOutcome
from spaced_repetition.domain.ports import Clock, ReviewStrategy
from spaced_repetition.infrastructure.clock import SystemClock


class SimpleReviewStrategy(ReviewStrategy):
    """
    Resets difficulty to easiest regardless of outcome.

    Items are always due immediately.
    """

    def __init__(self, clock: Clock | None = None):
        self._clock = clock or SystemClock()

    def next_review(self, item: Reviewable) -> datetime:
        if item is None:
            raise InvalidReviewItemError("next_review")
        return self._clock.now()

    def adjust_difficulty(self, item: Reviewable, outcome: ReviewOutcome) -> DifficultyRating:
        if item is None:
            raise InvalidReviewItemError("adjust_difficulty")
        return DifficultyRating.EASIEST
