# highlighter.py
# Marks which characters of a description made it match the query, as a list
# of bold/plain segments that concatenate back to the description.
#
# Indices are Python string indices (code points) for both marking and slicing.

from __future__ import annotations

from typing import List, Optional, Sequence

from emoji_picker.core.models import HighlightSegment, fold_char as _fold


def find_fuzzy_match_indices(term: str, word: str) -> Optional[List[int]]:
    """
    Indices in `word` consumed by an anchored fuzzy match of `term`, one per
    term character, or None if the term does not match. Case-insensitive.
    """
    if not term or not word:
        return None
    if _fold(term[0]) != _fold(word[0]):
        return None

    indices = [0]
    pos = 1
    for tc in term[1:]:
        target = _fold(tc)
        while pos < len(word) and _fold(word[pos]) != target:
            pos += 1
        if pos >= len(word):
            return None
        indices.append(pos)
        pos += 1
    return indices


def _segments_from_marks(text: str, marks: List[bool]) -> List[HighlightSegment]:
    segments: List[HighlightSegment] = []
    start = 0
    for i in range(1, len(text) + 1):
        if i == len(text) or marks[i] != marks[start]:
            segments.append(HighlightSegment(text=text[start:i], bold=marks[start]))
            start = i
    return segments


def build_highlight_segments(text: str, terms: Sequence[str]) -> List[HighlightSegment]:
    """
    Split `text` into bold runs (characters matched by some term) and plain
    runs. Each whitespace word is checked against every term independently.

    Words are located left to right with a first-occurrence search from the
    end of the previous word, so a repeated word is always found at its next
    occurrence, never an earlier one.
    """
    live_terms = [t for t in terms if t]
    if not live_terms or not text:
        return [HighlightSegment(text=text, bold=False)]

    marks = [False] * len(text)
    word_start = 0
    for word in text.split():
        pos = text.find(word, word_start)
        if pos < 0:
            continue
        for term in live_terms:
            indices = find_fuzzy_match_indices(term, word)
            if indices is None:
                continue
            for idx in indices:
                marks[pos + idx] = True
        word_start = pos + len(word)

    return _segments_from_marks(text, marks)
