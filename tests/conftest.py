# tests/conftest.py
from contextlib import contextmanager

import pytest

from emoji_picker.core.event_log import EventLog
from emoji_picker.utils.logger_utils import Log

DAY = 24 * 60 * 60
NOW = 1_700_000_000


@contextmanager
def app_log_at(directory):
    """Point the application log at `directory`, then put back whatever was there."""
    saved_path, saved_enabled = Log.path, Log.enabled
    Log.configure(str(directory))
    try:
        yield
    finally:
        Log.path, Log.enabled = saved_path, saved_enabled


@pytest.fixture(autouse=True)
def isolated_app_log(tmp_path):
    """Keep application log lines out of the real home directory."""
    with app_log_at(tmp_path / "applog"):
        yield


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "strokes.jsonl"


@pytest.fixture
def event_log(log_path):
    return EventLog(lambda: log_path)


@pytest.fixture
def corpus():
    return [
        "😀| grinning face| 1f600",
        "😬| grimacing face| 1f62c",
        "😢| crying face| 1f622",
        "😄| smiling face with open mouth| 1f604",
        "🙂| slightly smiling face| 1f642",
        "🐌| snail| 1f40c",
        "🚀| rocket| 1f680",
    ]
