# tests/test_fuzzy_matcher.py
import pytest

from emoji_picker.core.fuzzy_matcher import (
    entry_matches_terms,
    rank_entries,
    term_matches_word,
    tokenize_query,
)
from emoji_picker.core.models import Selection

from conftest import NOW


@pytest.mark.parametrize(
    "term, word, expected",
    [
        ("sm", "smile", True),
        ("sm", "small", True),
        ("sml", "smile", True),
        ("ss", "smiles", True),
        ("ml", "smile", False),
        ("smm", "smile", False),
        ("smilex", "smile", False),
        ("", "anything", True),
        ("", "", True),
        ("a", "", False),
    ],
)
def test_term_matches_word(term, word, expected):
    assert term_matches_word(term, word) is expected


def test_tokenize_query_lowercases_and_drops_blanks():
    assert tokenize_query("  Grin   FA ") == ["grin", "fa"]
    assert tokenize_query("   ") == []
    assert tokenize_query("") == []


def test_entry_matches_every_term_against_some_word():
    entry = "😀| Grinning Face| 1f600"
    assert entry_matches_terms(entry, ["gr"])
    assert entry_matches_terms(entry, ["gr", "fa"])
    assert entry_matches_terms(entry, ["fc", "gng"])
    assert not entry_matches_terms(entry, ["gr", "cr"])
    assert not entry_matches_terms(entry, ["rin"])


def test_entry_with_no_terms_matches():
    assert entry_matches_terms("😀| grinning face| 1f600", [])


def test_malformed_entries_never_match():
    assert not entry_matches_terms("😀 grinning face 1f600", ["gr"])
    assert not entry_matches_terms("", [])


def test_two_field_entry_can_still_match():
    assert entry_matches_terms("😀| grinning face", ["gr"])


def test_rank_filters_and_keeps_corpus_order_without_history(corpus):
    out = rank_entries(corpus, "face", [], now=NOW)
    assert [e.split("| ")[2] for e in out] == ["1f600", "1f62c", "1f622", "1f604", "1f642"]


def test_rank_orders_by_frecency(corpus):
    history = [
        Selection(code="1f62c", query="gr", ts=NOW),
        Selection(code="1f62c", query="g", ts=NOW),
    ]
    out = rank_entries(corpus, "gr", history, now=NOW)
    assert out[0].endswith("1f62c")
    assert out[1].endswith("1f600")


def test_rank_ignores_unrelated_query_history(corpus):
    history = [Selection(code="1f62c", query="cr", ts=NOW)]
    out = rank_entries(corpus, "gr", history, now=NOW)
    assert out[0].endswith("1f600")


def test_rank_truncates_to_slots(corpus):
    assert len(rank_entries(corpus, "", [], now=NOW)) == 5
    assert len(rank_entries(corpus, "", [], slots=2, now=NOW)) == 2


def test_no_match_falls_back_to_recently_used(corpus):
    history = [Selection(code="1f680", query="roc", ts=NOW)]
    out = rank_entries(corpus, "zzz", history, now=NOW)
    assert len(out) == 5
    assert out[0].endswith("1f680")


def test_fallback_ranks_the_whole_corpus():
    # rows without a description still take a slot; they render as placeholders
    corpus = ["# header", "😀| grinning face| 1f600"]
    assert rank_entries(corpus, "", [], now=NOW) == corpus
    assert rank_entries(corpus, "zzz", [], now=NOW) == corpus


def test_empty_corpus_ranks_nothing():
    assert rank_entries([], "gr", [], now=NOW) == []
