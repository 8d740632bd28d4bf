# emoji_picker/core/event_log.py
"""
EventLog
Append-only JSON-lines store of picker interactions.
 - keystroke events: write-only telemetry
 - select events: the only input to frecency ranking
 - best effort: I/O failures are swallowed, never surfaced to the UI
 - malformed lines are skipped one at a time on load
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Callable, List, Optional

from emoji_picker.core.models import (
    KeystrokeEvent,
    LogEvent,
    SelectEvent,
    Selection,
    event_from_record,
)
from emoji_picker.utils.config_manager import home_dir
from emoji_picker.utils.logger_utils import Log

logger = logging.getLogger(__name__)

PathProvider = Callable[[], Optional[Path]]

LOG_FILENAME = "emoji_picker_strokes.jsonl"


def current_timestamp() -> int:
    """Whole seconds since the Unix epoch (0 if the clock is before it)."""
    return max(0, int(time.time()))


def default_path_provider() -> Optional[Path]:
    home = home_dir()
    return home / LOG_FILENAME if home is not None else None


class EventLog:
    """
    Public API:
      append(event)
      log_keystroke(key, ts=None)
      log_select(code, query, ts=None)
      load_selections()
    """

    def __init__(self, path_provider: Optional[PathProvider] = None):
        self._path_provider = path_provider or default_path_provider

    @property
    def path(self) -> Optional[Path]:
        try:
            return self._path_provider()
        except Exception as e:  # a broken provider means "no history"
            logger.debug("event log path provider failed: %s", e)
            return None

    # Writing ---------------------------------------------------------------
    def append(self, event: LogEvent) -> None:
        path = self.path
        if path is None:
            return
        try:
            line = json.dumps(event.to_record(), ensure_ascii=False)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except (OSError, TypeError, ValueError) as e:
            logger.debug("event log append failed: %s", e)

    def log_keystroke(self, key: str, ts: Optional[int] = None) -> None:
        self.append(KeystrokeEvent(ts=current_timestamp() if ts is None else ts, key=key))

    def log_select(self, code: str, query: str, ts: Optional[int] = None) -> SelectEvent:
        """Record a pick. The query is stored as typed; it is lowercased on load."""
        event = SelectEvent(ts=current_timestamp() if ts is None else ts, code=code, query=query)
        self.append(event)
        return event

    # Reading ---------------------------------------------------------------
    def load_selections(self) -> List[Selection]:
        path = self.path
        if path is None:
            return []

        selections: List[Selection] = []
        skipped = 0
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as fh:
                for line in fh:
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        event = event_from_record(json.loads(line))
                    except ValueError:
                        event = None
                    if event is None:
                        skipped += 1
                        continue
                    if isinstance(event, SelectEvent):
                        selections.append(event.to_selection())
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.debug("event log read failed: %s", e)
            return selections

        if skipped:
            Log.write(f"[EventLog] skipped {skipped} malformed line(s) in {path}")
        return selections
