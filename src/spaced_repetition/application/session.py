"""
Study session over a working set of review items.

Builds the queue of items to present in one sitting by:
1. Filtering candidates to due items
2. Splitting them into new and existing items
3. Capping each group in original order and concatenating new-then-existing

Reviewing an item mutates it in place. A correct answer completes the item for
the rest of the sitting; an incorrect answer keeps it in the queue.
"""

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime
from typing import Generic, TypeVar

from spaced_repetition.domain.constants import NEVER_REVIEWED
from spaced_repetition.domain.models import Reviewable, ReviewOutcome
from spaced_repetition.domain.ports import Clock, ReviewStrategy
from spaced_repetition.infrastructure.clock import SystemClock

from .strategies.supermemo2 import SuperMemo2ReviewStrategy

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Reviewable)

_NEW = "new"
_EXISTING = "existing"


class StudySession(Generic[T]):
    """
    One study sitting over a caller-owned collection of items.

    The session holds references to the caller's items, not copies:
    `review()` updates them in place and returns the same instance.

    Attributes:
        max_new_cards: Cap on never-reviewed items per sitting (None = unbounded).
        max_existing_cards: Cap on previously reviewed due items (None = unbounded).
        clock: Time source, read once per review and once per queue build.
        review_strategy: Computes new difficulty and next review dates.
    """

    def __init__(
        self,
        items: Iterable[T],
        max_new_cards: int | None = None,
        max_existing_cards: int | None = None,
        clock: Clock | None = None,
        review_strategy: ReviewStrategy | None = None,
    ):
        self._items: list[T] = list(items)
        self.max_new_cards = max_new_cards
        self.max_existing_cards = max_existing_cards
        self.clock = clock or SystemClock()
        self.review_strategy = review_strategy or SuperMemo2ReviewStrategy(self.clock)

        # id(item) -> group the item counted against when first reviewed
        self._groups: dict[int, str] = {}
        self._completed: set[int] = set()
        self.reviewed_count = 0

    # ---------------------------------------------------------------------
    # Configuration
    # ---------------------------------------------------------------------

    @property
    def max_new_cards(self) -> int | None:
        return self._max_new_cards

    @max_new_cards.setter
    def max_new_cards(self, value: int | None) -> None:
        self._max_new_cards = _validate_cap("max_new_cards", value)

    @property
    def max_existing_cards(self) -> int | None:
        return self._max_existing_cards

    @max_existing_cards.setter
    def max_existing_cards(self, value: int | None) -> None:
        self._max_existing_cards = _validate_cap("max_existing_cards", value)

    # ---------------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------------

    def is_new(self, item: Reviewable) -> bool:
        return item.review_date == NEVER_REVIEWED

    def is_due(self, item: Reviewable, now: datetime | None = None) -> bool:
        """An item is due if it was never reviewed or its review date has passed."""
        if self.is_new(item):
            return True
        if now is None:
            now = self.clock.now()
        return item.review_date <= now

    def due_items(self) -> list[T]:
        """Materialize the queue for the remainder of this sitting."""
        now = self.clock.now()
        caps = {_NEW: self.max_new_cards, _EXISTING: self.max_existing_cards}
        selected: dict[str, list[T]] = {_NEW: [], _EXISTING: []}

        for item in self._items:
            group = self._groups.get(id(item))
            if group is None:
                if not self.is_due(item, now):
                    continue
                group = _NEW if self.is_new(item) else _EXISTING

            cap = caps[group]
            if cap is not None and len(selected[group]) >= cap:
                continue
            selected[group].append(item)

        queue = [
            item
            for item in selected[_NEW] + selected[_EXISTING]
            if id(item) not in self._completed
        ]
        logger.debug(
            f"Queue: {len(queue)} due "
            f"(new={len(selected[_NEW])}, existing={len(selected[_EXISTING])}, "
            f"completed={len(self._completed)})"
        )
        return queue

    def peek(self) -> T | None:
        """Return the next item to present, or None when the sitting is done."""
        queue = self.due_items()
        return queue[0] if queue else None

    def next_review(self, item: T) -> datetime:
        return self.review_strategy.next_review(item)

    @property
    def completed_count(self) -> int:
        return len(self._completed)

    def __iter__(self) -> Iterator[T]:
        return iter(self.due_items())

    def __len__(self) -> int:
        return len(self.due_items())

    def __bool__(self) -> bool:
        return self.peek() is not None

    # ---------------------------------------------------------------------
    # State transition
    # ---------------------------------------------------------------------

    def review(self, item: T, outcome: ReviewOutcome) -> T:
        """
        Record a review of `item` and update its scheduling state in place.

        Args:
            item: The item that was presented.
            outcome: How well it was recalled.

        Returns:
            The same item instance, updated.
        """
        outcome = ReviewOutcome(outcome)
        new_difficulty = self.review_strategy.adjust_difficulty(item, outcome)
        now = self.clock.now()

        key = id(item)
        if key not in self._groups:
            if not any(candidate is item for candidate in self._items):
                logger.warning("Reviewing an item that is not part of this session")
            self._groups[key] = _NEW if self.is_new(item) else _EXISTING

        if outcome.is_correct:
            item.previous_correct_review = item.review_date
            item.correct_review_streak += 1
            self._completed.add(key)
        else:
            item.previous_correct_review = NEVER_REVIEWED
            item.correct_review_streak = 0
            self._completed.discard(key)

        item.review_date = now
        item.difficulty_rating = new_difficulty
        self.reviewed_count += 1

        logger.debug(
            f"Reviewed item as {outcome.name}: streak={item.correct_review_streak}, "
            f"difficulty={item.difficulty_rating}"
        )
        return item


def _validate_cap(name: str, value: int | None) -> int | None:
    if value is not None and value < 0:
        raise ValueError(f"{name} must be >= 0 or None, got {value}")
    return value
