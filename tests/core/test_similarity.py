"""Similarity - tests for similar_text scoring and character frequency.

Tests cover:
    - Reference scores ("World" vs "word", "Hello World" vs "Hello Big World")
    - Identical strings score 100, disjoint and empty inputs score 0
    - Score stays within 0-100
    - Equal-length ties resolve by argument order, so swapping arguments can change the score
    - Long inputs are scored without cubic rescanning
    - char_frequency counts and first-occurrence ordering
"""

import time

import pytest

from strkit.core.similarity import char_frequency, similarity


# --- similarity ---------------------------------------------------------------

def test_similarity_world_word():
    # "or" + "d" matched: 3 * 2 / 9
    assert similarity("World", "word") == pytest.approx(200 / 3)


def test_similarity_takes_first_longest_run_then_recurses():
    # "Hello " (6) then "World" (5): 11 * 2 / 26
    assert similarity("Hello World", "Hello Big World") == pytest.approx(2200 / 26)


def test_similarity_identical_strings():
    assert similarity("Hello", "Hello") == 100.0


def test_similarity_disjoint_strings():
    assert similarity("abc", "xyz") == 0.0


def test_similarity_empty_inputs():
    assert similarity("", "") == 0.0
    assert similarity("abc", "") == 0.0


def test_similarity_tie_goes_to_earliest_in_first_argument():
    # "foo" and "bar" tie at 3; scanning "bafoobar" finds "foo" first, leaving "ba" to match
    assert similarity("bafoobar", "barfoo") == pytest.approx(1000 / 14)
    # scanning "barfoo" finds "bar" first, leaving nothing to match
    assert similarity("barfoo", "bafoobar") == pytest.approx(600 / 14)


def test_similarity_long_inputs_finish_quickly():
    start = time.perf_counter()
    assert similarity("a" * 2000, "a" * 2000) == 100.0
    assert similarity("ab" * 300, "ba" * 300) > 99.0
    assert time.perf_counter() - start < 2.0


@pytest.mark.parametrize("a,b", [
    ("kitten", "sitting"), ("flaw", "lawn"), ("a", "aaaa"), ("abcabc", "cbacba"),
])
def test_similarity_bounded(a, b):
    assert 0.0 <= similarity(a, b) <= 100.0


# --- char_frequency -----------------------------------------------------------

def test_char_frequency_counts():
    assert char_frequency("hello") == {"h": 1, "e": 1, "l": 2, "o": 1}


def test_char_frequency_first_occurrence_order():
    assert list(char_frequency("banana")) == ["b", "a", "n"]


def test_char_frequency_empty():
    assert char_frequency("") == {}


def test_char_frequency_totals_match_length():
    text = "naïve café 🌍🌍"
    assert sum(char_frequency(text).values()) == len(text)
    assert char_frequency(text)["🌍"] == 2
