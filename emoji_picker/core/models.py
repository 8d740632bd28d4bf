# models.py
# Plain records shared across the picker core: corpus rows, log events,
# selections and highlight segments.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

FIELD_SEP = "| "
NUM_SLOTS = 5


@dataclass(frozen=True)
class ParsedEntry:
    """A corpus line split into its glyph, description and code."""

    glyph: str
    description: str
    code: str


def fold_char(ch: str) -> str:
    # first char of the lowercase form keeps one index per character
    return ch.lower()[:1]


def fold_case(text: str) -> str:
    """Lowercase character by character, so the result has the same length as `text`."""
    return "".join(fold_char(ch) for ch in text)


def split_entry(entry: str) -> List[str]:
    return entry.split(FIELD_SEP)


def parse_entry(entry: str) -> Optional[ParsedEntry]:
    """Return the three fields of a corpus line, or None for malformed rows."""
    parts = split_entry(entry)
    if len(parts) < 3:
        return None
    return ParsedEntry(glyph=parts[0], description=parts[1], code=parts[2])


def entry_code(entry: str) -> Optional[str]:
    parts = split_entry(entry)
    return parts[2] if len(parts) >= 3 else None


@dataclass(frozen=True)
class Selection:
    """A past pick: which code was chosen, for which query, and when."""

    code: str
    query: str
    ts: int


@dataclass(frozen=True)
class KeystrokeEvent:
    ts: int
    key: str

    def to_record(self) -> dict:
        return {"type": "keystroke", "ts": self.ts, "key": self.key}


@dataclass(frozen=True)
class SelectEvent:
    ts: int
    code: str
    query: str

    def to_record(self) -> dict:
        return {"type": "select", "ts": self.ts, "code": self.code, "query": self.query}

    def to_selection(self) -> Selection:
        return Selection(code=self.code, query=self.query.lower(), ts=self.ts)


LogEvent = Union[KeystrokeEvent, SelectEvent]


def event_from_record(record) -> Optional[LogEvent]:
    """
    Rebuild a log event from a decoded JSON object.
    Returns None for anything that is not one of the two known shapes.
    """
    if not isinstance(record, dict):
        return None
    ts = record.get("ts")
    # bool is an int subclass; timestamps are unsigned whole seconds
    if not isinstance(ts, int) or isinstance(ts, bool) or ts < 0:
        return None

    kind = record.get("type")
    if kind == "keystroke":
        key = record.get("key")
        if isinstance(key, str):
            return KeystrokeEvent(ts=ts, key=key)
    elif kind == "select":
        code, query = record.get("code"), record.get("query")
        if isinstance(code, str) and isinstance(query, str):
            return SelectEvent(ts=ts, code=code, query=query)
    return None


@dataclass(frozen=True)
class HighlightSegment:
    text: str
    bold: bool


@dataclass
class RenderedEntry:
    """
    What a front end needs to draw one result row.
    Malformed corpus rows render as an empty placeholder.
    """

    glyph: str = ""
    description: str = ""
    code: str = ""
    segments: List[HighlightSegment] = field(default_factory=list)
    image: Optional[bytes] = None

    @property
    def is_placeholder(self) -> bool:
        return not self.code
