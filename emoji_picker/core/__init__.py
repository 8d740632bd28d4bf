"""
emoji_picker.core

The lookup engine behind the picker:
 - append-only interaction log (EventLog)
 - query-conditioned frecency scoring (compute_frecency)
 - anchored fuzzy matching and ranking (rank_entries)
 - match highlighting (build_highlight_segments)
 - the stateful controller tying them together (SearchSession)
"""

from .event_log import EventLog
from .frecency import compute_frecency, queries_related
from .fuzzy_matcher import entry_matches_terms, rank_entries, term_matches_word, tokenize_query
from .highlighter import build_highlight_segments, find_fuzzy_match_indices
from .models import HighlightSegment, RenderedEntry, Selection
from .search_session import QueryState, SearchSession

__all__ = [
    "EventLog",
    "compute_frecency",
    "queries_related",
    "entry_matches_terms",
    "rank_entries",
    "term_matches_word",
    "tokenize_query",
    "build_highlight_segments",
    "find_fuzzy_match_indices",
    "HighlightSegment",
    "RenderedEntry",
    "Selection",
    "QueryState",
    "SearchSession",
]
