# Application Package
from .config import SessionConfig, resolve_config
from .factory import build_study_session, get_review_strategy
from .session import StudySession
from .strategies import SimpleReviewStrategy, SuperMemo2ReviewStrategy

__all__ = [
    "StudySession",
    "SuperMemo2ReviewStrategy",
    "SimpleReviewStrategy",
    "SessionConfig",
    "resolve_config",
    "build_study_session",
    "get_review_strategy",
]
