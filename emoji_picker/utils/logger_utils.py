# logger_utils.py - application log and timing metrics for the picker

import os
import time
from datetime import datetime
from typing import Optional

# Directory where log files are stored, overridable via Log.configure()
LOG_DIR = os.path.join(os.path.expanduser("~"), ".emoji_picker", "logs")

# Path to the default log file
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "emoji_picker.log")


class Log:
    """
    Lightweight file logger for messages and metrics.
    Each entry is written as: [YYYY-MM-DD HH:MM:SS] message
    Quiet on the console: the picker owns the terminal while it runs.
    Writing never raises, a full or read-only disk only loses log lines.
    """

    path: str = DEFAULT_LOG_PATH
    enabled: bool = True

    @classmethod
    def configure(cls, path: Optional[str] = None, enabled: bool = True) -> None:
        """Point the log at another file (or directory) or switch it off."""
        if path:
            if os.path.isdir(path) or not os.path.splitext(path)[1]:
                path = os.path.join(path, "emoji_picker.log")
            cls.path = os.path.expanduser(path)
        cls.enabled = enabled

    @classmethod
    def write(cls, msg: str) -> None:
        if not cls.enabled:
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        try:
            os.makedirs(os.path.dirname(cls.path), exist_ok=True)
            with open(cls.path, "a", encoding="utf-8") as f:
                f.write(f"[{ts}] {msg}\n")
        except OSError:
            pass

    @classmethod
    def metric(cls, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts).
        Example: [2026-01-01 12:45:02] search done: 0.003s
        """
        cls.write(f"{tag}: {value}{unit}")

    @staticmethod
    def time_block(label: str) -> "_Timer":
        """
        Measure how long a block takes:
            with Log.time_block("search"):
                session.insert("a")
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to time a code block."""

    def __init__(self, label: str):
        self.label = label
        self.start = time.perf_counter()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        dur = round(time.perf_counter() - self.start, 4)
        Log.metric(f"{self.label} done", dur, "s")
