"""Tests for the scheduling domain models."""

from datetime import datetime

import pytest

from spaced_repetition.domain.constants import NEVER_REVIEWED
from spaced_repetition.domain.errors import DifficultyOutOfRangeError
from spaced_repetition.domain.models import (
    DifficultyRating,
    Reviewable,
    ReviewItem,
    ReviewOutcome,
)


class TestDifficultyRating:
    """Tests for the DifficultyRating value type."""

    def test_convert_to_int(self):
        rating = DifficultyRating(50)

        assert rating.to_percentage() == rating.percentage
        assert int(rating) == 50

    def test_convert_from_int(self):
        rating = DifficultyRating.from_percentage(65)

        assert rating.percentage == 65

    def test_convert_to_byte(self):
        rating = DifficultyRating(50)

        assert rating.to_byte() == bytes([50])
        assert rating.to_byte()[0] == rating.percentage

    def test_convert_from_byte(self):
        assert DifficultyRating.from_byte(bytes([65])).percentage == 65
        assert DifficultyRating.from_byte(65).percentage == 65

    def test_round_trips_for_every_valid_percentage(self):
        for p in range(0, 101):
            rating = DifficultyRating(p)
            assert DifficultyRating.from_percentage(rating.to_percentage()) == rating
            assert DifficultyRating.from_byte(rating.to_byte()) == rating

    @pytest.mark.parametrize("value", [-1, 101, 255])
    def test_out_of_range_is_rejected(self, value):
        with pytest.raises(DifficultyOutOfRangeError) as exc_info:
            DifficultyRating(value)

        assert exc_info.value.value == value
        assert isinstance(exc_info.value, ValueError)

    def test_non_integer_is_rejected(self):
        with pytest.raises(TypeError):
            DifficultyRating(50.5)
        with pytest.raises(TypeError):
            DifficultyRating(True)

    def test_from_byte_rejects_multiple_bytes(self):
        with pytest.raises(ValueError):
            DifficultyRating.from_byte(b"\x01\x02")

    @pytest.mark.parametrize("value,expected", [(-8, 0), (0, 0), (42, 42), (100, 100), (111, 100)])
    def test_clamped_saturates(self, value, expected):
        assert DifficultyRating.clamped(value).percentage == expected

    def test_named_constants(self):
        assert DifficultyRating.EASIEST == DifficultyRating(0)
        assert DifficultyRating.MOST_DIFFICULT == DifficultyRating(100)

    def test_equality_and_ordering(self):
        assert DifficultyRating(41) == DifficultyRating(41)
        assert DifficultyRating(41) < DifficultyRating(50)
        assert max(DifficultyRating(3), DifficultyRating(97)) == DifficultyRating(97)
        assert len({DifficultyRating(7), DifficultyRating(7)}) == 1

    def test_is_immutable(self):
        rating = DifficultyRating(10)
        with pytest.raises(AttributeError):
            rating.percentage = 20


class TestReviewOutcome:
    def test_quality_scores(self):
        assert ReviewOutcome.INCORRECT.quality == 1
        assert ReviewOutcome.HESITANT.quality == 2
        assert ReviewOutcome.PERFECT.quality == 3

    def test_correctness(self):
        assert not ReviewOutcome.INCORRECT.is_correct
        assert ReviewOutcome.HESITANT.is_correct
        assert ReviewOutcome.PERFECT.is_correct


class TestReviewItem:
    """Tests for the stock ReviewItem record."""

    def test_default_values(self):
        item = ReviewItem()

        assert item.difficulty_rating == DifficultyRating.EASIEST
        assert item.review_date == NEVER_REVIEWED
        assert item.previous_correct_review == NEVER_REVIEWED
        assert item.correct_review_streak == 0
        assert item.is_new

    def test_with_values(self):
        reviewed = datetime(2024, 1, 2)
        item = ReviewItem(
            difficulty_rating=DifficultyRating(30),
            review_date=reviewed,
            previous_correct_review=datetime(2024, 1, 1),
            correct_review_streak=2,
        )

        assert item.difficulty_rating.percentage == 30
        assert item.review_date == reviewed
        assert item.correct_review_streak == 2
        assert not item.is_new

    def test_items_compare_by_identity(self):
        assert ReviewItem() != ReviewItem()

    def test_satisfies_reviewable(self):
        assert isinstance(ReviewItem(), Reviewable)

    def test_custom_types_satisfy_reviewable(self):
        class Flashcard:
            def __init__(self):
                self.front = "hallo"
                self.difficulty_rating = DifficultyRating.EASIEST
                self.review_date = NEVER_REVIEWED
                self.previous_correct_review = NEVER_REVIEWED
                self.correct_review_streak = 0

        assert isinstance(Flashcard(), Reviewable)
