"""Search & Extraction - delimited lookup, first replacement, initials, masking, tokens, word count.

Invariants:
    - between returns None (never raises) when start or end is missing
    - mask_string follows slice semantics: out-of-range offsets clamp, negative
      offsets count from the end, negative length masks nothing
    - tokenize preserves order and never yields empty tokens

Design Decisions:
    - count_words uses Unicode letters; a single ' or - between letters
      joins them into one word ("don't", "well-known")
"""

import re

from strkit.core.errors import InvalidArgumentError

_WORD_RE = re.compile(r"[^\W\d_]+(?:['-][^\W\d_]+)*")


def between(s: str, start: str, end: str) -> str | None:
    """Return the text between the first start and the next end after it.

    >>> between("a[b]c", "[", "]")
    'b'
    >>> between("abc", "[", "]") is None
    True
    """
    start_pos = s.find(start)
    if start_pos == -1:
        return None
    start_pos += len(start)
    end_pos = s.find(end, start_pos)
    if end_pos == -1:
        return None
    return s[start_pos:end_pos]


def replace_first(search: str, replace: str, subject: str) -> str:
    return subject.replace(search, replace, 1)


def extract_initials(s: str) -> str:
    """Uppercased first character of each space-separated word."""
    return "".join(word[:1].upper() for word in s.split(" "))


def mask_string(s: str, start: int, length: int, mask: str = "*") -> str:
    """Replace length characters from start with repetitions of mask.

    >>> mask_string("4111111111111111", 4, 8)
    '4111********1111'
    """
    return s[:start] + mask * length + s[start + length:]


def tokenize(s: str, delimiter: str = " ") -> list[str]:
    if not delimiter:
        raise InvalidArgumentError("delimiter must not be empty", "delimiter")
    return [piece for piece in (p.strip() for p in s.split(delimiter)) if piece]


def count_words(s: str) -> int:
    return len(_WORD_RE.findall(s))
