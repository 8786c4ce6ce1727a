"""Similarity - similar_text style percentage and character frequencies.

Invariants:
    - similarity returns a float in [0.0, 100.0]; identical non-empty strings score 100.0
    - Two empty strings score 0.0
    - Ties between equally long common substrings go to the earliest in a, then in b,
      so similarity(a, b) and similarity(b, a) can differ
    - char_frequency counts sum to len(s)

Design Decisions:
    - Matching runs on an explicit work stack instead of recursion, so deep
      splits on long inputs cannot hit the recursion limit
"""

from collections import Counter

from strkit.core.domain_types import Percentage


def _longest_common_substring(
    a: str, a_lo: int, a_hi: int, b: str, b_lo: int, b_hi: int,
) -> tuple[int, int, int]:
    """Return (pos_a, pos_b, length) of the first longest common substring."""
    best_a = best_b = best_len = 0
    for i in range(a_lo, a_hi):
        # only a strictly longer run replaces the best, so stop once none fits
        if a_hi - i <= best_len:
            break
        for j in range(b_lo, b_hi):
            if b_hi - j <= best_len:
                break
            k = 0
            while i + k < a_hi and j + k < b_hi and a[i + k] == b[j + k]:
                k += 1
            if k > best_len:
                best_a, best_b, best_len = i, j, k
    return best_a, best_b, best_len


def _matched_chars(a: str, b: str) -> int:
    """Characters matched by repeatedly splitting around the longest common run."""
    total = 0
    stack = [(0, len(a), 0, len(b))]
    while stack:
        a_lo, a_hi, b_lo, b_hi = stack.pop()
        pos_a, pos_b, length = _longest_common_substring(
            a, a_lo, a_hi, b, b_lo, b_hi,
        )
        if not length:
            continue
        total += length
        if pos_a > a_lo and pos_b > b_lo:
            stack.append((a_lo, pos_a, b_lo, pos_b))
        if pos_a + length < a_hi and pos_b + length < b_hi:
            stack.append((pos_a + length, a_hi, pos_b + length, b_hi))
    return total


def similarity(a: str, b: str) -> Percentage:
    """Percentage of characters the two strings have in common.

    >>> round(similarity("World", "word"), 2)
    66.67
    """
    total_len = len(a) + len(b)
    if total_len == 0:
        return Percentage(0.0)
    return Percentage(_matched_chars(a, b) * 2 * 100 / total_len)


def char_frequency(s: str) -> dict[str, int]:
    return dict(Counter(s))
