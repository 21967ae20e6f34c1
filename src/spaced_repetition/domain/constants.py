"""Centralized constants for the spaced repetition core.

All magic numbers live here so the strategies and the session
import from a single source of truth.
"""

from datetime import datetime

# ---------- Review dates ----------
# Marks an item that has never been reviewed, or a missing previous correct review.
NEVER_REVIEWED = datetime.min

# ---------- Difficulty ----------
MIN_DIFFICULTY = 0
MAX_DIFFICULTY = 100

# ---------- SuperMemo 2 ----------
# Linear mapping between difficulty percentage and easiness factor: e = m * d + b
EASINESS_SLOPE = -0.012
EASINESS_INTERCEPT = 2.5
SECOND_INTERVAL_DAYS = 6
