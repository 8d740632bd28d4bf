# images.py
# Image lookup capability: code -> raw image bytes (or None).
# Images are stored base64-encoded as <images dir>/<code>.base64; decoding the
# bytes into pixels is the front end's job.

from __future__ import annotations

import base64
import binascii
from pathlib import Path
from typing import Callable, Dict, Optional

from emoji_picker.core.corpus import IMAGES_DIRNAME
from emoji_picker.utils.config_manager import home_dir

ImageLookup = Callable[[str], Optional[bytes]]


class ImageStore:
    """Callable image lookup with a session-lifetime cache of hits."""

    def __init__(self, data_dir: Optional[Path]):
        if data_dir is not None:
            self.images_dir: Optional[Path] = data_dir / IMAGES_DIRNAME
        else:
            home = home_dir()
            self.images_dir = home / IMAGES_DIRNAME if home is not None else None
        self._cache: Dict[str, bytes] = {}

    def __call__(self, code: str) -> Optional[bytes]:
        if code in self._cache:
            return self._cache[code]
        if self.images_dir is None or not code:
            return None

        path = self.images_dir / f"{code}.base64"
        try:
            raw = base64.b64decode(path.read_text(encoding="ascii").strip(), validate=True)
        except (OSError, UnicodeDecodeError, binascii.Error, ValueError):
            return None
        if not raw:
            return None

        self._cache[code] = raw
        return raw

    @property
    def cached(self) -> int:
        return len(self._cache)
