# Domain Package
from .constants import NEVER_REVIEWED
from .errors import (
    ConfigurationError,
    DifficultyOutOfRangeError,
    InvalidReviewItemError,
    SpacedRepetitionError,
)
from .models import DifficultyRating, Reviewable, ReviewItem, ReviewOutcome
from .ports import Clock, ReviewStrategy

__all__ = [
    "NEVER_REVIEWED",
    "DifficultyRating",
    "ReviewOutcome",
    "Reviewable",
    "ReviewItem",
    "Clock",
    "ReviewStrategy",
    "SpacedRepetitionError",
    "InvalidReviewItemError",
    "DifficultyOutOfRangeError",
    "ConfigurationError",
]
