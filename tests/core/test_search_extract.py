"""Search & Extraction - tests for between, replace_first, initials, masking, tokens, word count.

Tests cover:
    - between returns text between delimiters or None, never raises
    - replace_first only touches the first occurrence
    - extract_initials skips empty tokens from repeated spaces
    - mask_string with in-range, overflowing and negative offsets
    - tokenize trims and drops empty pieces
    - count_words over letters, hyphenated words, contractions and non-ASCII text
"""

import pytest

from strkit.core.errors import InvalidArgumentError
from strkit.core.search_extract import (
    between,
    count_words,
    extract_initials,
    mask_string,
    replace_first,
    tokenize,
)


# --- between ------------------------------------------------------------------

def test_between_finds_enclosed_text():
    assert between("a[b]c", "[", "]") == "b"


def test_between_returns_none_without_start():
    assert between("abc", "[", "]") is None


def test_between_returns_none_without_end_after_start():
    assert between("a]b[c", "[", "]") is None


def test_between_uses_first_pair():
    assert between("a[b]c[d]", "[", "]") == "b"


def test_between_with_multi_character_delimiters():
    assert between("x<<y>>z", "<<", ">>") == "y"


def test_between_adjacent_delimiters_give_empty_string():
    assert between("[]", "[", "]") == ""


def test_between_same_start_and_end_delimiter():
    assert between("aXa", "a", "a") == "X"


# --- replace_first ------------------------------------------------------------

def test_replace_first_only_first_occurrence():
    assert replace_first("foo", "bar", "foo foo") == "bar foo"


def test_replace_first_unchanged_when_missing():
    assert replace_first("baz", "bar", "foo foo") == "foo foo"


# --- extract_initials ---------------------------------------------------------

def test_extract_initials():
    assert extract_initials("john ronald tolkien") == "JRT"


def test_extract_initials_skips_empty_tokens():
    assert extract_initials("john  smith") == "JS"


def test_extract_initials_of_empty_string():
    assert extract_initials("") == ""


# --- mask_string --------------------------------------------------------------

def test_mask_string_masks_middle():
    assert mask_string("4111111111111111", 4, 8) == "4111********1111"


def test_mask_string_custom_mask():
    assert mask_string("password", 0, 4, "#") == "####word"


def test_mask_string_start_past_end_appends_mask():
    assert mask_string("abc", 10, 2) == "abc**"


def test_mask_string_negative_start_counts_from_end():
    assert mask_string("abcdef", -3, 2, "#") == "abc##f"


def test_mask_string_empty_mask_deletes():
    assert mask_string("abcdef", 1, 2, "") == "adef"


# --- tokenize -----------------------------------------------------------------

def test_tokenize_trims_and_drops_empty():
    assert tokenize("  a, b,,c ", ",") == ["a", "b", "c"]


def test_tokenize_default_space_delimiter():
    assert tokenize("one  two three") == ["one", "two", "three"]


def test_tokenize_empty_input():
    assert tokenize("") == []


def test_tokenize_rejects_empty_delimiter():
    with pytest.raises(InvalidArgumentError):
        tokenize("a b", "")


# --- count_words --------------------------------------------------------------

def test_count_words_simple():
    assert count_words("Hello world") == 2


def test_count_words_joins_hyphens_and_apostrophes():
    assert count_words("well-known don't stop") == 3


def test_count_words_digits_split_words():
    assert count_words("abc123def") == 2


def test_count_words_non_ascii_letters():
    assert count_words("Olá mundo, ça va?") == 4


def test_count_words_without_letters():
    assert count_words("") == 0
    assert count_words("--- '' 42") == 0
