"""Cleanup - whitespace, special-character and accent normalization, reversal.

Invariants:
    - fold_to_ascii never raises: unmappable code points are dropped
    - reverse works on code points; reverse(reverse(s)) == s for every s
    - remove_special_chars keeps ASCII letters, digits and whitespace only

Design Decisions:
    - Transliteration is NFKD decomposition + ASCII encode with errors="ignore",
      preceded by a small table for letters that have no decomposition (ß, æ, ø, ...)
    - reverse does not keep grapheme clusters together: a combining accent on a
      decomposed letter ends up on its left neighbour after reversal
"""

import re
import unicodedata

_WHITESPACE_RUN_RE = re.compile(r"\s+")
_SPECIAL_CHARS_RE = re.compile(r"[^a-zA-Z0-9\s]")

# Letters and punctuation NFKD leaves as non-ASCII
_TRANSLIT_TABLE = str.maketrans({
    "ß": "ss", "ẞ": "SS",
    "æ": "ae", "Æ": "AE",
    "œ": "oe", "Œ": "OE",
    "ø": "o", "Ø": "O",
    "đ": "d", "Đ": "D",
    "ð": "d", "Ð": "D",
    "ł": "l", "Ł": "L",
    "þ": "th", "Þ": "TH",
    "ħ": "h", "Ħ": "H",
    "ı": "i",
    "‘": "'", "’": "'", "‚": "'",
    "“": '"', "”": '"', "„": '"',
    "–": "-", "—": "-",
    "«": "<<", "»": ">>",
})


def fold_to_ascii(text: str) -> str:
    """Best-effort transliteration to ASCII, dropping what cannot be mapped."""
    text = text.translate(_TRANSLIT_TABLE)
    decomposed = unicodedata.normalize("NFKD", text)
    return decomposed.encode("ascii", "ignore").decode("ascii")


def remove_extra_spaces(s: str) -> str:
    """Trim, then collapse every whitespace run to a single space."""
    return _WHITESPACE_RUN_RE.sub(" ", s.strip())


def remove_special_chars(s: str) -> str:
    return _SPECIAL_CHARS_RE.sub("", s)


def normalize_accents(s: str) -> str:
    """Replace accented characters with their closest ASCII equivalents.

    "Crème Brûlée" -> "Creme Brulee", "Straße" -> "Strasse".
    Characters with no ASCII equivalent (CJK, emoji) are removed.
    """
    return fold_to_ascii(s)


def reverse(s: str) -> str:
    return s[::-1]
