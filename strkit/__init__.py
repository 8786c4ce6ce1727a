"""strkit - stateless string utilities.

Invariants:
    - Importing the package has no side effects (no logging setup, no settings load)
    - Every public operation is a plain function re-exported here from strkit.core

Design Decisions:
    - Explicit re-exports, no star imports: the public surface is this list
"""

from strkit.core.case_transforms import (
    capitalize_words,
    slugify,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
    ucwords_custom,
)
from strkit.core.cleanup import (
    normalize_accents,
    remove_extra_spaces,
    remove_special_chars,
    reverse,
)
from strkit.core.domain_types import DEFAULT_ENCODING, PadType, Percentage
from strkit.core.encoding import (
    html_entity_decode,
    html_entity_encode,
    sanitize_for_html,
    url_decode,
    url_encode,
)
from strkit.core.errors import (
    InsufficientEntropyError,
    InvalidArgumentError,
    StrkitError,
    UnsupportedAlgorithmError,
)
from strkit.core.hashing import hash_text, random_string
from strkit.core.length_padding import pad_string, repeat, split_by_length, truncate
from strkit.core.predicates import (
    contains,
    ends_with,
    is_anagram,
    is_empty,
    is_mirror,
    is_palindrome,
    starts_with,
)
from strkit.core.search_extract import (
    between,
    count_words,
    extract_initials,
    mask_string,
    replace_first,
    tokenize,
)
from strkit.core.similarity import char_frequency, similarity

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_ENCODING",
    "InsufficientEntropyError",
    "InvalidArgumentError",
    "PadType",
    "Percentage",
    "StrkitError",
    "UnsupportedAlgorithmError",
    "between",
    "capitalize_words",
    "char_frequency",
    "contains",
    "count_words",
    "ends_with",
    "extract_initials",
    "hash_text",
    "html_entity_decode",
    "html_entity_encode",
    "is_anagram",
    "is_empty",
    "is_mirror",
    "is_palindrome",
    "mask_string",
    "normalize_accents",
    "pad_string",
    "random_string",
    "remove_extra_spaces",
    "remove_special_chars",
    "repeat",
    "replace_first",
    "reverse",
    "sanitize_for_html",
    "similarity",
    "slugify",
    "split_by_length",
    "starts_with",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
    "tokenize",
    "truncate",
    "ucwords_custom",
    "url_decode",
    "url_encode",
]
