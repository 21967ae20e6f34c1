"""
Ports (interfaces) for scheduling collaborators.

These define the contract that strategies and time sources must implement.
The study session depends on these abstractions, not concrete implementations.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from .models import DifficultyRating, Reviewable, ReviewOutcome


class Clock(ABC):
    """
    Port for reading the current time.

    Implementations:
        - SystemClock: Reads the local wall clock.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current date and time."""
        pass


class ReviewStrategy(ABC):
    """
    Port for an interchangeable scheduling algorithm.

    Implementations:
        - SuperMemo2ReviewStrategy: The SM-2 interval and easiness rules.
        - SimpleReviewStrategy: Resets difficulty to easiest on every review.
    """

    @abstractmethod
    def next_review(self, item: Reviewable) -> datetime:
        """
        Compute when the item should next be reviewed.

        Args:
            item: The item to schedule.

        Returns:
            The date and time the item becomes due.
        """
        pass

    @abstractmethod
    def adjust_difficulty(self, item: Reviewable, outcome: ReviewOutcome) -> DifficultyRating:
        """
        Compute the item's difficulty after a review with the given outcome.

        Must not modify the item; the caller writes the result back.
        """
        pass
