"""
System Clock — Infrastructure adapter for the local wall clock.

Implements Clock by reading datetime.now() on every call.
"""

from datetime import datetime

from spaced_repetition.domain.ports import Clock


class SystemClock(Clock):
    """
    Reads the current local time, uncached.

    Returns naive datetimes so they compare with NEVER_REVIEWED.
    """

    def now(self) -> datetime:
        return datetime.now()
