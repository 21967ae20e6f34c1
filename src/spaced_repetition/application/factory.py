"""
Study Session Factory
Centralizes the logic for selecting a review strategy and wiring a session from config.
"""

import logging
from collections.abc import Iterable
from typing import TypeVar

from spaced_repetition.application.config import SessionConfig, resolve_config
from spaced_repetition.application.session import StudySession
from spaced_repetition.application.strategies import (
    SimpleReviewStrategy,
    SuperMemo2ReviewStrategy,
)
from spaced_repetition.domain.errors import ConfigurationError
from spaced_repetition.domain.models import Reviewable
from spaced_repetition.domain.ports import Clock, ReviewStrategy
from spaced_repetition.infrastructure.clock import SystemClock

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Reviewable)

_STRATEGIES: dict[str, type[ReviewStrategy]] = {
    "supermemo2": SuperMemo2ReviewStrategy,
    "simple": SimpleReviewStrategy,
}


def get_review_strategy(config: SessionConfig, clock: Clock | None = None) -> ReviewStrategy:
    """
    Returns the ReviewStrategy implementation named by config.
    """
    try:
        strategy_cls = _STRATEGIES[config.strategy]
    except KeyError:
        raise ConfigurationError(f"Unknown review strategy: {config.strategy!r}") from None
    return strategy_cls(clock or SystemClock())


def build_study_session(
    items: Iterable[T],
    config: SessionConfig | None = None,
    clock: Clock | None = None,
) -> StudySession[T]:
    """
    Build a StudySession for one sitting.

    Args:
        items: Candidate items, mutated in place by reviews.
        config: Session settings; resolved from file/env if not provided.
        clock: Time source shared by the session and its strategy.
    """
    config = config or resolve_config()
    clock = clock or SystemClock()
    strategy = get_review_strategy(config, clock)

    logger.debug(
        f"Session: strategy={config.strategy}, "
        f"max_new={config.max_new_cards}, max_existing={config.max_existing_cards}"
    )
    return StudySession(
        items,
        max_new_cards=config.max_new_cards,
        max_existing_cards=config.max_existing_cards,
        clock=clock,
        review_strategy=strategy,
    )
