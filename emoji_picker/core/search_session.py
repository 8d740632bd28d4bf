# emoji_picker/core/search_session.py
"""
SearchSession - the picker's single owner of mutable state.

Holds the typed query, the current top matches and the selection cursor.
Every query edit re-runs matching + frecency ranking synchronously and then
clamps the cursor, so a renderer never sees a half-updated state.

Public API:
  insert(chars), delete_last(), clear()     -> edit query, re-search
  move_up(), move_down()                    -> move cursor only
  commit()                                  -> log the pick, return its glyph
  handle_key(key)                           -> keystroke logging + dispatch
  search_text, selected_index, matches, entries()
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from emoji_picker.core.event_log import EventLog, current_timestamp
from emoji_picker.core.frecency import HALF_LIFE_SECS
from emoji_picker.core.fuzzy_matcher import rank_entries, tokenize_query
from emoji_picker.core.highlighter import build_highlight_segments
from emoji_picker.core.images import ImageLookup
from emoji_picker.core.models import NUM_SLOTS, RenderedEntry, Selection, parse_entry
from emoji_picker.utils.logger_utils import Log


class QueryState:
    """Typed characters plus the lowercased terms derived from them."""

    def __init__(self) -> None:
        self.letters: List[str] = []
        self.terms: List[str] = []

    @property
    def text(self) -> str:
        return "".join(self.letters)

    def push(self, chars: str) -> None:
        self.letters.extend(chars)
        self._retokenize()

    def pop(self) -> None:
        if self.letters:
            self.letters.pop()
        self._retokenize()

    def clear(self) -> None:
        self.letters.clear()
        self._retokenize()

    def _retokenize(self) -> None:
        self.terms = tokenize_query(self.text)


class SearchSession:
    def __init__(
        self,
        corpus: Sequence[str],
        event_log: Optional[EventLog] = None,
        *,
        slots: int = NUM_SLOTS,
        half_life_secs: float = HALF_LIFE_SECS,
        image_lookup: Optional[ImageLookup] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.corpus = list(corpus)
        self.event_log = event_log or EventLog()
        self.slots = slots
        self.half_life_secs = half_life_secs
        self.image_lookup = image_lookup
        self._clock = clock or current_timestamp

        self.query = QueryState()
        self.matches: List[str] = []
        self.selected_index = 0
        self.selected_glyph: Optional[str] = None
        self.selections: List[Selection] = self.event_log.load_selections()

        Log.write(
            f"[Session] started: {len(self.corpus)} entries, "
            f"{len(self.selections)} past selections"
        )
        self.search()

    # Render contract ------------------------------------------------------
    @property
    def search_text(self) -> str:
        return self.query.text

    @property
    def terms(self) -> List[str]:
        return self.query.terms

    def entries(self) -> List[RenderedEntry]:
        """One RenderedEntry per current match, in rank order."""
        out: List[RenderedEntry] = []
        for entry in self.matches:
            parsed = parse_entry(entry)
            if parsed is None:
                out.append(RenderedEntry())
                continue
            image = self.image_lookup(parsed.code) if self.image_lookup else None
            out.append(
                RenderedEntry(
                    glyph=parsed.glyph,
                    description=parsed.description,
                    code=parsed.code,
                    segments=build_highlight_segments(parsed.description, self.query.terms),
                    image=image,
                )
            )
        return out

    # Searching -------------------------------------------------------------
    def search(self) -> None:
        self.matches = rank_entries(
            self.corpus,
            self.query.text,
            self.selections,
            slots=self.slots,
            now=self._clock(),
            half_life_secs=self.half_life_secs,
        )
        self._clamp()

    def _clamp(self) -> None:
        max_idx = max(len(self.matches) - 1, 0)
        self.selected_index = min(max(self.selected_index, 0), max_idx)

    # Query edits -----------------------------------------------------------
    def insert(self, chars: str) -> None:
        self.query.push(chars)
        self.selected_index = 0
        self.search()

    def delete_last(self) -> None:
        self.query.pop()
        self.selected_index = 0
        self.search()

    def clear(self) -> None:
        self.query.clear()
        self.selected_index = 0
        self.search()

    # Cursor ----------------------------------------------------------------
    def move_up(self) -> None:
        self.selected_index -= 1
        self._clamp()

    def move_down(self) -> None:
        self.selected_index += 1
        self._clamp()

    # Picking ---------------------------------------------------------------
    def current(self) -> Optional[str]:
        if 0 <= self.selected_index < len(self.matches):
            return self.matches[self.selected_index]
        return None

    def commit(self) -> Optional[str]:
        """
        Log the entry under the cursor as picked for the current query.
        Returns its glyph, or None when there is nothing to pick.
        """
        parsed = parse_entry(self.current() or "")
        if parsed is None:
            return None

        event = self.event_log.log_select(parsed.code, self.query.text, ts=self._clock())
        self.selections.append(event.to_selection())
        self.selected_glyph = parsed.glyph
        Log.write(f"[Session] picked {parsed.code} for query '{self.query.text}'")
        return parsed.glyph

    # Key dispatch ----------------------------------------------------------
    def handle_key(self, key: str) -> None:
        """
        Apply one key from the front end. Named keys: up, down, backspace,
        ctrl-backspace, shift (ignored). Anything else is typed text.
        """
        self.event_log.log_keystroke(key, ts=self._clock())

        if key == "up":
            self.move_up()
        elif key == "down":
            self.move_down()
        elif key == "backspace":
            self.delete_last()
        elif key == "ctrl-backspace":
            self.clear()
        elif key == "shift":
            pass
        elif key:
            self.insert(key)
