# corpus.py
# Locating the data directory and reading the emoji corpus file.
# The corpus is a flat list of "<glyph>| <description>| <code>" lines.

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from emoji_picker.utils.config_manager import home_dir
from emoji_picker.utils.logger_utils import Log

CORPUS_FILENAME = "emojis9.txt"
IMAGES_DIRNAME = "emoji_picker_images"


def find_data_dir(explicit: Optional[str] = None) -> Optional[Path]:
    """
    Find the directory holding the corpus and image files.
    Search order:
     1. `explicit` (from config), if it exists
     2. <executable dir>/data
     3. ./data (development checkout)
     4. ~/.emoji_picker/data
     5. ~ itself when a legacy ~/emoji_picker_images folder exists
    """
    candidates: List[Path] = []
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.append(Path(sys.argv[0]).resolve().parent / "data")
    candidates.append(Path("data"))

    home = home_dir()
    if home is not None:
        candidates.append(home / ".emoji_picker" / "data")

    for cand in candidates:
        if cand.is_dir():
            return cand

    if home is not None and (home / IMAGES_DIRNAME).is_dir():
        return home
    return None


def _read_lines(path: Path) -> Optional[List[str]]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        return None


def load_corpus(data_dir: Optional[Path], filename: str = CORPUS_FILENAME) -> List[str]:
    """
    Read corpus lines from <data_dir>/<filename>, falling back to ~/<filename>.
    An unreadable corpus yields an empty list.
    """
    places = []
    if data_dir is not None:
        places.append(data_dir / filename)
    home = home_dir()
    if home is not None:
        places.append(home / filename)

    for path in places:
        lines = _read_lines(path)
        if lines is not None:
            Log.write(f"[Corpus] loaded {len(lines)} entries from {path}")
            return lines

    Log.write(f"[Corpus] no readable {filename}, starting with an empty corpus")
    return []
