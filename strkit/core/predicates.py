"""Predicates - substring tests and palindrome/anagram/mirror checks.

Invariants:
    - An empty needle always matches (starts_with, ends_with, contains)
    - is_palindrome(s) == is_palindrome(reverse(s))
    - is_anagram strips non-[A-Za-z0-9] but does NOT lowercase:
      is_anagram("Listen", "silent") is False
"""

import re
from collections import Counter

_NON_ASCII_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")


def starts_with(s: str, prefix: str) -> bool:
    return s.startswith(prefix)


def ends_with(s: str, suffix: str) -> bool:
    return s.endswith(suffix)


def contains(s: str, sub: str) -> bool:
    return sub in s


def is_empty(s: str) -> bool:
    """True for the empty string and for whitespace-only strings."""
    return s.strip() == ""


def is_palindrome(s: str) -> bool:
    """Case-insensitive palindrome check over ASCII letters and digits."""
    cleaned = _NON_ASCII_ALNUM_RE.sub("", s).lower()
    return cleaned == cleaned[::-1]


def is_anagram(a: str, b: str) -> bool:
    """Compare the letter/digit multisets of a and b.

    Punctuation and whitespace are ignored; case is not.
    """
    return (
        Counter(_NON_ASCII_ALNUM_RE.sub("", a))
        == Counter(_NON_ASCII_ALNUM_RE.sub("", b))
    )


def is_mirror(a: str, b: str) -> bool:
    return a == b[::-1]
