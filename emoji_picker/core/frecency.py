# frecency.py
# Recency/frequency score per emoji code, conditioned on the typed query.
# Each past pick adds 0.5 ** (age / half_life), but only when the query it was
# picked under is prefix-related to the current one ("gr" counts for "grin"
# and vice versa, "cr" does not).

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, Optional

from emoji_picker.core.event_log import current_timestamp
from emoji_picker.core.models import Selection

HALF_LIFE_SECS = 7.0 * 24.0 * 60.0 * 60.0  # 7 days


def queries_related(current: str, stored: str) -> bool:
    """True when either query is empty or one is a prefix of the other."""
    return current.startswith(stored) or stored.startswith(current)


def decay(age_secs: float, half_life_secs: float = HALF_LIFE_SECS) -> float:
    return 0.5 ** (max(0.0, age_secs) / half_life_secs)


def compute_frecency(
    selections: Iterable[Selection],
    current_query: str,
    now: Optional[int] = None,
    half_life_secs: float = HALF_LIFE_SECS,
) -> Dict[str, float]:
    """
    Map code -> summed decayed weight of its related past selections.
    Future timestamps count as age 0. Codes never picked are absent (score 0).
    """
    now = current_timestamp() if now is None else now
    current = current_query.lower()

    scores: Dict[str, float] = defaultdict(float)
    for sel in selections:
        if not current or queries_related(current, sel.query):
            scores[sel.code] += decay(now - sel.ts, half_life_secs)
    return dict(scores)
