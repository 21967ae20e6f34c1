# Review Strategies Package
from .simple import SimpleReviewStrategy
from .supermemo2 import SuperMemo2ReviewStrategy

__all__ = ["SuperMemo2ReviewStrategy", "SimpleReviewStrategy"]
