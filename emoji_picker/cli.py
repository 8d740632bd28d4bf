"""
cli.py - command line front end for the emoji picker
Features:
- One-shot search with a color-coded result table and bold match highlights
- Pick a result by number (recorded so it ranks higher next time)
- Show/set configuration
- Launch the interactive TUI picker
- Uses Rich for tables and formatting
"""

import argparse
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from emoji_picker.core.corpus import find_data_dir, load_corpus
from emoji_picker.core.event_log import EventLog
from emoji_picker.core.images import ImageStore
from emoji_picker.core.models import HighlightSegment, RenderedEntry
from emoji_picker.core.search_session import SearchSession
from emoji_picker.utils.config_manager import Config
from emoji_picker.utils.logger_utils import Log

# initialise console for rich output
console = Console()


def build_session(cfg: Config) -> SearchSession:
    """Wire a SearchSession from configuration: data dir, corpus, log, images."""
    if cfg.get("app_log_dir"):
        Log.configure(cfg.get("app_log_dir"))
    data_dir = find_data_dir(cfg.get("data_dir") or None)
    corpus = load_corpus(data_dir, cfg.get("corpus_file"))
    return SearchSession(
        corpus,
        EventLog(cfg.log_path_provider()),
        slots=cfg.slots,
        half_life_secs=cfg.half_life_seconds,
        image_lookup=ImageStore(data_dir),
    )


def segments_to_text(segments: Sequence[HighlightSegment], style: str = "bold yellow") -> Text:
    """Rich Text with matched characters styled."""
    text = Text()
    for seg in segments:
        text.append(seg.text, style=style if seg.bold else None)
    return text


def results_table(entries: List[RenderedEntry], selected: int = -1, query: str = "") -> Table:
    """
    Result rows: index shortcut, glyph, highlighted description, code.
    The selected row is marked with an arrow.
    """
    title = f"Results for '{query}'" if query else "Recently used"
    table = Table(title=title, box=box.SIMPLE, show_edge=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Emoji")
    table.add_column("Description")
    table.add_column("Code", style="dim")

    for i, entry in enumerate(entries, 1):
        marker = "→" if i - 1 == selected else str(i)
        if entry.is_placeholder:
            table.add_row(marker, "", Text("(unreadable entry)", style="dim"), "")
            continue
        table.add_row(marker, entry.glyph, segments_to_text(entry.segments), entry.code)
    return table


# COMMANDS ---------------------------------------------------------------------
def cmd_search(args, cfg: Config) -> int:
    session = build_session(cfg)
    with Log.time_block("search"):
        session.insert(" ".join(args.query))

    entries = session.entries()
    if not entries:
        console.print("[dim](no emoji corpus found)[/dim]")
        return 1

    if args.pick is None:
        console.print(results_table(entries, query=session.search_text))
        return 0

    if not 1 <= args.pick <= len(entries):
        console.print(f"[red]No result #{args.pick}[/red] (1-{len(entries)})")
        return 2

    for _ in range(args.pick - 1):
        session.move_down()
    glyph = session.commit()
    if glyph is None:
        console.print("[red]That entry cannot be picked.[/red]")
        return 2
    console.print(f"[green]Picked:[/green] {glyph}")
    return 0


def cmd_config(args, cfg: Config) -> int:
    if args.key is None:
        cfg.show()
        return 0
    if args.value is None:
        console.print(f"{args.key} = {cfg.get(args.key, '[red]unset[/red]')}")
        return 0
    try:
        cfg.set(args.key, args.value)
    except ValueError as e:
        console.print(f"[red]Bad value for {args.key}:[/red] {e}")
        return 2
    return 0


def cmd_tui(args, cfg: Config) -> int:
    # textual is imported lazily so one-shot searches stay fast
    from emoji_picker.tui_app import EmojiPickerApp

    glyph = EmojiPickerApp(build_session(cfg)).run()
    if glyph:
        print(glyph)
    return 0


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emoji-picker", description="Find emoji by typing.")
    parser.add_argument("--config", type=str, default=None, help="path to config.json")
    sub = parser.add_subparsers(dest="command")

    p_search = sub.add_parser("search", help="rank emoji for a query")
    p_search.add_argument("query", nargs="*", default=[], help="query terms")
    p_search.add_argument("--pick", type=int, default=None, help="pick result N (1-based)")
    p_search.set_defaults(func=cmd_search)

    p_config = sub.add_parser("config", help="show or set configuration")
    p_config.add_argument("key", nargs="?", default=None)
    p_config.add_argument("value", nargs="?", default=None)
    p_config.set_defaults(func=cmd_config)

    p_tui = sub.add_parser("tui", help="interactive picker")
    p_tui.set_defaults(func=cmd_tui)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 0
    cfg = Config(args.config)
    return args.func(args, cfg)


if __name__ == "__main__":
    raise SystemExit(main())
