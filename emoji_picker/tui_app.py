# tui_app.py — Emoji Picker TUI Application
# -------------------------------------------------------
# Terminal front end over SearchSession.
# Features:
#  - Live results as you type (up to 5, best frecency first)
#  - Matched characters highlighted in each description
#  - Up/Down move the cursor, Enter picks, Esc closes
#  - Ctrl+U (or Ctrl+Backspace) clears the query
# The app exits with the picked glyph as its return value.
# -------------------------------------------------------

from __future__ import annotations

from typing import List, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Footer, Header, Static

from emoji_picker.cli import results_table
from emoji_picker.core.models import RenderedEntry
from emoji_picker.core.search_session import SearchSession

# textual key name -> session key name
KEY_MAP = {
    "up": "up",
    "down": "down",
    "backspace": "backspace",
    "ctrl+backspace": "ctrl-backspace",
    "ctrl+u": "ctrl-backspace",
    "shift": "shift",
}


def session_key(event_key: str, character: Optional[str]) -> Optional[str]:
    """Translate a textual key event into a SearchSession key, or None to ignore it."""
    if event_key in KEY_MAP:
        return KEY_MAP[event_key]
    if character and character.isprintable():
        return character
    return None


class QueryLine(Static):
    """Top line echoing what has been typed so far."""

    def show(self, text: str) -> None:
        self.update(f"[b]>[/b] {text}" if text else "[dim]Start typing…[/dim]")


class ResultsPanel(Static):
    """Ranked results with the selected row marked."""

    def show(self, entries: List[RenderedEntry], selected: int, query: str) -> None:
        if not entries:
            self.update("[dim]No emoji available[/dim]")
            return
        self.update(results_table(entries, selected=selected, query=query))


# Main Application -----------------------------------------------------------------
class EmojiPickerApp(App):
    """
    Architecture:
     - key events to SearchSession.handle_key
     - session render contract to widgets
    """

    BINDINGS = [
        ("enter", "pick", "Pick"),
        ("escape", "close", "Close"),
    ]

    def __init__(self, session: SearchSession):
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main"):
            yield QueryLine(id="query")
            yield ResultsPanel(id="results")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        s = self.session
        self.query_one(QueryLine).show(s.search_text)
        self.query_one(ResultsPanel).show(s.entries(), s.selected_index, s.search_text)

    async def on_key(self, event: events.Key) -> None:
        if event.key in ("enter", "escape"):
            return
        key = session_key(event.key, event.character)
        if key is None:
            return
        event.stop()
        self.session.handle_key(key)
        self.refresh_view()

    # Actions ----------------------------------------------------------------------
    def action_pick(self) -> None:
        self.exit(self.session.commit())

    def action_close(self) -> None:
        self.exit(None)
