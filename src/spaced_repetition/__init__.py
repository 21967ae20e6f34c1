"""spaced_repetition: SuperMemo-2 review scheduling and study sessions."""

from spaced_repetition.application import (
    SessionConfig,
    SimpleReviewStrategy,
    StudySession,
    SuperMemo2ReviewStrategy,
    build_study_session,
    get_review_strategy,
    resolve_config,
)
from spaced_repetition.domain import (
    NEVER_REVIEWED,
    Clock,
    ConfigurationError,
    DifficultyOutOfRangeError,
    DifficultyRating,
    InvalidReviewItemError,
    Reviewable,
    ReviewItem,
    ReviewOutcome,
    ReviewStrategy,
    SpacedRepetitionError,
)
from spaced_repetition.infrastructure import SystemClock

__version__ = "0.1.0"

__all__ = [
    "NEVER_REVIEWED",
    "DifficultyRating",
    "ReviewOutcome",
    "Reviewable",
    "ReviewItem",
    "Clock",
    "ReviewStrategy",
    "SystemClock",
    "StudySession",
    "SuperMemo2ReviewStrategy",
    "SimpleReviewStrategy",
    "SessionConfig",
    "resolve_config",
    "build_study_session",
    "get_review_strategy",
    "SpacedRepetitionError",
    "InvalidReviewItemError",
    "DifficultyOutOfRangeError",
    "ConfigurationError",
]
