"""Case Transforms - slugs, camel/Pascal/snake/kebab/title case, word capitalization.

Invariants:
    - slugify output matches ^[a-z0-9-]*$ and never starts or ends with "-"
    - slugify never raises on text that fails to transliterate
    - to_kebab_case replaces each [a-z0-9] run with a single "-" (lossy: "Hello World" -> "- -")
      and leaves "_" and other non-alphanumerics in place ("foo_bar" -> "-_-")
    - to_snake_case only treats ASCII A-Z as word boundaries

Design Decisions:
    - Transliteration shared with cleanup.normalize_accents (fold_to_ascii)
    - to_title_case keeps apostrophes inside a word ("they're" -> "They're")
"""

import re
import unicodedata

from strkit.core.cleanup import fold_to_ascii
from strkit.core.errors import InvalidArgumentError

_NON_ALNUM_RUN_RE = re.compile(r"[\W_]+")
_NON_SLUG_RE = re.compile(r"[^-a-zA-Z0-9]+")
_ASCII_UPPER_RE = re.compile(r"[A-Z]")
_NON_SNAKE_RE = re.compile(r"[^a-z0-9_]")
_KEBAB_RUN_RE = re.compile(r"[a-z0-9]+")
_TITLE_LETTER = r"[^\W_][\u0300-\u036f]*"
_TITLE_WORD_RE = re.compile(rf"(?:{_TITLE_LETTER})+(?:['’](?:{_TITLE_LETTER})+)*")
_WORD_START_RE = re.compile(r"(^|[ \t\r\n\f\v])([^ \t\r\n\f\v])")


def slugify(text: str) -> str:
    """Convert arbitrary text to a lowercase, hyphen-delimited ASCII slug.

    Runs of characters that are neither letters nor digits become one hyphen,
    the result is transliterated to ASCII, leftovers outside [A-Za-z0-9-]
    are removed, then it is lowercased and trimmed of hyphens.

    >>> slugify("Héllo, World!")
    'hello-world'
    """
    text = unicodedata.normalize("NFC", text)
    text = _NON_ALNUM_RUN_RE.sub("-", text)
    text = fold_to_ascii(text)
    text = _NON_SLUG_RE.sub("", text)
    return text.lower().strip("-")


def _title_joined(s: str) -> str:
    """Lowercase, split on -, _ and whitespace, uppercase each word start, join."""
    words = s.lower().replace("-", " ").replace("_", " ").split()
    return "".join(word[:1].upper() + word[1:] for word in words)


def to_camel_case(s: str) -> str:
    """hello_world-test -> helloWorldTest"""
    joined = _title_joined(s)
    return joined[:1].lower() + joined[1:]


def to_pascal_case(s: str) -> str:
    """hello_world-test -> HelloWorldTest"""
    return _title_joined(s)


def to_snake_case(s: str) -> str:
    """HelloWorld -> hello_world; anything outside [a-z0-9_] becomes "_"."""
    s = s[:1].lower() + s[1:]
    s = _ASCII_UPPER_RE.sub(lambda m: "_" + m.group(0).lower(), s)
    return _NON_SNAKE_RE.sub("_", s)


def to_kebab_case(s: str) -> str:
    return _KEBAB_RUN_RE.sub("-", s.strip().lower())


def to_title_case(s: str) -> str:
    """Unicode-aware title case: first letter of each word up, the rest down.

    Input is NFC-normalized first; combining marks that have no precomposed
    form stay inside their word.
    """
    def _title_word(match: re.Match) -> str:
        word = match.group(0)
        return word[:1].title() + word[1:].lower()

    return _TITLE_WORD_RE.sub(_title_word, unicodedata.normalize("NFC", s))


def capitalize_words(s: str) -> str:
    """Uppercase the first character after each whitespace delimiter.

    Only word starts change; the rest of each word keeps its case.
    """
    return _WORD_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), s)


def ucwords_custom(s: str, delimiter: str = " ") -> str:
    """Uppercase the first character of each delimiter-separated token.

    >>> ucwords_custom("hello-big-world", "-")
    'Hello-Big-World'
    """
    if not delimiter:
        raise InvalidArgumentError("delimiter must not be empty", "delimiter")
    return delimiter.join(
        token[:1].upper() + token[1:] for token in s.split(delimiter)
    )
