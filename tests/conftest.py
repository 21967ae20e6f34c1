import os
from datetime import datetime

import pytest

from builders import FixedClock


@pytest.fixture
def now():
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def clock(now):
    """A clock frozen at `now`."""
    return FixedClock(now)


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Mocks Path.home() to point to a temp dir."""
    home = tmp_path / "home"
    home.mkdir()

    # Isolate config lookups from the real home directory
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop SPACED_REPETITION_* variables leaking in from the outer environment."""
    for key in list(os.environ):
        if key.startswith("SPACED_REPETITION_"):
            monkeypatch.delenv(key)
