# fuzzy_matcher.py
# Anchored fuzzy matching of query terms against corpus descriptions, and the
# frecency-ordered ranking built on top of it.
#
# A term matches a word when their first characters are equal and the rest of
# the term appears, in order, later in the word: "sm" -> "smile", "sml" ->
# "smile", but "ml" does not match "smile".

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from emoji_picker.core.frecency import HALF_LIFE_SECS, compute_frecency
from emoji_picker.core.models import NUM_SLOTS, Selection, entry_code, fold_case, split_entry

logger = logging.getLogger(__name__)


def tokenize_query(query: str) -> List[str]:
    """Case-fold the query and split it into non-empty whitespace terms."""
    return fold_case(query).split()


def term_matches_word(term: str, word: str) -> bool:
    if not term:
        return True
    if not word or term[0] != word[0]:
        return False

    # subsequence scan over the rest of the word; consumed chars are never revisited
    rest = iter(word[1:])
    return all(any(wc == tc for wc in rest) for tc in term[1:])


def entry_matches_terms(entry: str, terms: Sequence[str]) -> bool:
    """
    Every term must match at least one word of the entry's description.
    Rows without a description field never match.
    """
    parts = split_entry(entry)
    if len(parts) < 2:
        return False
    words = fold_case(parts[1]).split()

    for term in terms:
        if not term:
            continue
        if not any(term_matches_word(term, word) for word in words):
            return False
    return True


def _by_frecency(entries: Sequence[str], scores: Dict[str, float]) -> List[str]:
    # sorted() is stable, so equal scores keep corpus order
    return sorted(entries, key=lambda e: -scores.get(entry_code(e) or "", 0.0))


def rank_entries(
    corpus: Sequence[str],
    query: str,
    selections: Sequence[Selection],
    slots: int = NUM_SLOTS,
    now: Optional[int] = None,
    half_life_secs: float = HALF_LIFE_SECS,
) -> List[str]:
    """
    Top `slots` corpus entries for `query`, best frecency first.

    With no terms, or no entry matching them, fall back to the whole corpus
    ranked by an empty-query frecency pass (every past pick counts): the
    "recently used" view.
    """
    terms = tokenize_query(query)

    if terms:
        scores = compute_frecency(selections, query, now=now, half_life_secs=half_life_secs)
        matched = [e for e in corpus if entry_matches_terms(e, terms)]
        if matched:
            return _by_frecency(matched, scores)[:slots]
        logger.debug("no match for %r, falling back to recent view", query)

    scores = compute_frecency(selections, "", now=now, half_life_secs=half_life_secs)
    return _by_frecency(list(corpus), scores)[:slots]
