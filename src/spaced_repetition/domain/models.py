"""
Domain models for review scheduling.

These are pure data structures with no I/O or external dependencies.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import ClassVar, Protocol, runtime_checkable

from .constants import MAX_DIFFICULTY, MIN_DIFFICULTY, NEVER_REVIEWED
from .errors import DifficultyOutOfRangeError


@dataclass(frozen=True, order=True)
class DifficultyRating:
    """
    How hard an item is to recall, as a percentage.

    0 is the easiest possible item, 100 the most difficult. Values outside
    that range are rejected; use `clamped()` to saturate instead.

    Attributes:
        percentage: Integer in [0, 100].
    """

    EASIEST: ClassVar["DifficultyRating"]
    MOST_DIFFICULT: ClassVar["DifficultyRating"]

    percentage: int

    def __post_init__(self):
        if isinstance(self.percentage, bool) or not isinstance(self.percentage, int):
            raise TypeError(
                f"Difficulty rating must be an int, got {type(self.percentage).__name__}"
            )
        if not MIN_DIFFICULTY <= self.percentage <= MAX_DIFFICULTY:
            raise DifficultyOutOfRangeError(self.percentage)

    @classmethod
    def clamped(cls, value: int) -> "DifficultyRating":
        """Build a rating, saturating values outside [0, 100] at the nearest bound."""
        return cls(max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, value)))

    @classmethod
    def from_percentage(cls, percentage: int) -> "DifficultyRating":
        return cls(percentage)

    @classmethod
    def from_byte(cls, value: bytes | int) -> "DifficultyRating":
        """Build a rating from a single unsigned byte."""
        if isinstance(value, (bytes, bytearray)):
            if len(value) != 1:
                raise ValueError(f"Expected exactly one byte, got {len(value)}")
            value = value[0]
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Byte value must be between 0 and 255, got {value}")
        return cls(value)

    def to_percentage(self) -> int:
        return self.percentage

    def to_byte(self) -> bytes:
        return bytes([self.percentage])

    def __int__(self) -> int:
        return self.percentage

    def __str__(self) -> str:
        return f"{self.percentage}%"


DifficultyRating.EASIEST = DifficultyRating(MIN_DIFFICULTY)
DifficultyRating.MOST_DIFFICULT = DifficultyRating(MAX_DIFFICULTY)


class ReviewOutcome(IntEnum):
    """Quality grade given after presenting an item (SM-2 quality score)."""

    INCORRECT = 1
    HESITANT = 2
    PERFECT = 3

    @property
    def quality(self) -> int:
        return int(self)

    @property
    def is_correct(self) -> bool:
        return self is not ReviewOutcome.INCORRECT


@runtime_checkable
class Reviewable(Protocol):
    """
    Capability set an object needs to take part in scheduling.

    Any type exposing these mutable attributes can be handed to a
    review strategy or a study session.
    """

    difficulty_rating: DifficultyRating
    review_date: datetime
    previous_correct_review: datetime
    correct_review_streak: int


@dataclass(eq=False)
class ReviewItem:
    """
    Scheduling state of one learnable item.

    Attributes:
        difficulty_rating: Current difficulty.
        review_date: When the item was last reviewed; NEVER_REVIEWED for new items.
        previous_correct_review: Review date superseded by the latest correct
            answer. Only meaningful once correct_review_streak >= 2.
        correct_review_streak: Consecutive correct answers since the last
            incorrect one (or since creation).
    """

    difficulty_rating: DifficultyRating = field(default_factory=lambda: DifficultyRating.EASIEST)
    review_date: datetime = NEVER_REVIEWED
    previous_correct_review: datetime = NEVER_REVIEWED
    correct_review_streak: int = 0

    @property
    def is_new(self) -> bool:
        return self.review_date == NEVER_REVIEWED
