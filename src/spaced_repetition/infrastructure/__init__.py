# Infrastructure Package
from .clock import SystemClock

__all__ = ["SystemClock"]
