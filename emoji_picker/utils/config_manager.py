# config_manager.py - JSON config manager

import json
import os
from pathlib import Path
from typing import Callable, Optional

from emoji_picker.utils.logger_utils import Log

DEFAULT_CONFIG_PATH = os.path.join(os.path.expanduser("~"), ".emoji_picker", "config.json")


def home_dir() -> Optional[Path]:
    """The user's home directory, or None when it cannot be resolved."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    # expanduser leaves "~" untouched when HOME is unset and no passwd entry exists
    if str(home) in ("", "~"):
        return None
    return home


def _fits(value, default) -> bool:
    """A loaded value must have its default's type (ints pass for floats, bools never pass as numbers)."""
    if isinstance(value, bool) != isinstance(default, bool):
        return False
    if isinstance(default, float):
        return isinstance(value, (int, float))
    return isinstance(value, type(default))


class Config:
    def __init__(self, path: Optional[str] = None):
        self.path = path or DEFAULT_CONFIG_PATH
        self.data = {
            "log_path": "~/emoji_picker_strokes.jsonl",  # event log (keystrokes + selections)
            "data_dir": "",  # empty = search the usual places
            "corpus_file": "emojis9.txt",
            "slots": 5,
            "half_life_days": 7.0,
            "app_log_dir": "",  # empty = ~/.emoji_picker/logs
        }
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    for k, v in loaded.items():
                        if k not in self.data:
                            continue
                        if _fits(v, self.data[k]):
                            self.data[k] = v
                        else:
                            Log.write(f"[Config] bad value for {k!r}: {v!r}, keeping {self.data[k]!r}")
                else:
                    Log.write(f"[Config] ignoring non-object config in {self.path}")
            except (OSError, ValueError) as e:
                Log.write(f"[Config] load failed, using defaults: {e}")
        else:
            self.save()

    def save(self):
        try:
            os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
            with open(self.path, "w", encoding="utf8") as f:
                json.dump(self.data, f, indent=2)
        except OSError as e:
            Log.write(f"[Config] save failed: {e}")

    def show(self):
        for k, v in self.data.items():
            print(f"{k:15} = {v}")

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, val):
        if key not in self.data:
            print("No such option")
            return
        self.data[key] = type(self.data[key])(val)
        self.save()

    # Derived values -----------------------------------------------------------
    @property
    def slots(self) -> int:
        return max(1, int(self.data["slots"]))

    @property
    def half_life_seconds(self) -> float:
        # a zero or negative half-life would divide by zero in the decay
        return max(float(self.data["half_life_days"]), 1e-3) * 24.0 * 60.0 * 60.0

    def log_path_provider(self) -> Callable[[], Optional[Path]]:
        """
        Path provider for the event log. A leading "~" resolves against the
        home directory at call time; None when there is no home to resolve.
        """
        raw = str(self.data["log_path"])

        def provider() -> Optional[Path]:
            if raw.startswith("~"):
                home = home_dir()
                if home is None:
                    return None
                return home / raw[1:].lstrip("/\\")
            return Path(raw) if raw else None

        return provider
