"""Exception hierarchy for the spaced repetition core."""


class SpacedRepetitionError(Exception):
    """Base class for all errors raised by this package."""


class InvalidReviewItemError(SpacedRepetitionError, ValueError):
    """A review strategy was handed no item."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}() requires a review item, got None")
        self.operation = operation


class DifficultyOutOfRangeError(SpacedRepetitionError, ValueError):
    """A difficulty percentage fell outside the 0-100 range."""

    def __init__(self, value: int):
        super().__init__(f"Difficulty rating must be between 0 and 100, got {value}")
        self.value = value


class ConfigurationError(SpacedRepetitionError):
    """Configuration names something this package cannot build."""
