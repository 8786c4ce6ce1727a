"""Hashing - hex digests by algorithm name and random hex tokens.

Invariants:
    - hash_text returns a lowercase hex digest or raises UnsupportedAlgorithmError
    - Algorithm names are case-insensitive; "-" and "/" are accepted for "_"
    - Variable-length digests (shake_*) are not supported
    - Unknown or unusable encodings raise InvalidArgumentError (argument "encoding")
    - random_string(n) returns n // 2 random bytes as hex (odd n -> n - 1 chars)
    - random_string is the only impure function in core/ (reads the OS CSPRNG)
"""

import hashlib
import secrets

from strkit.core.domain_types import DEFAULT_ENCODING
from strkit.core.encoding import check_encoding
from strkit.core.errors import (
    InsufficientEntropyError,
    InvalidArgumentError,
    UnsupportedAlgorithmError,
)

SUPPORTED_ALGORITHMS: frozenset[str] = frozenset(
    name.lower() for name in hashlib.algorithms_available
    if not name.lower().startswith("shake_")
)


def normalize_algorithm(algo: str) -> str:
    """Map a user-facing name to its hashlib name ("SHA-256" -> "sha256").

    Raises UnsupportedAlgorithmError when no hashlib algorithm matches.
    """
    name = algo.strip().lower()
    candidates = (
        name,
        name.replace("-", "_").replace("/", "_"),
        name.replace("-", "").replace("/", "_"),
    )
    for candidate in candidates:
        if candidate in SUPPORTED_ALGORITHMS:
            return candidate
    raise UnsupportedAlgorithmError(algo)


def hash_text(s: str, algo: str = "sha256", encoding: str = DEFAULT_ENCODING) -> str:
    """Hex digest of s encoded with encoding.

    >>> hash_text("abc")[:16]
    'ba7816bf8f01cfea'
    """
    name = normalize_algorithm(algo)
    try:
        data = s.encode(check_encoding(encoding))
    except UnicodeEncodeError as exc:
        raise InvalidArgumentError(
            f"text cannot be encoded as '{encoding}'", "encoding",
        ) from exc
    try:
        digest = hashlib.new(name, data)
    except ValueError as exc:
        # listed by OpenSSL but refused at construction (e.g. FIPS mode)
        raise UnsupportedAlgorithmError(algo) from exc
    return digest.hexdigest()


def random_string(length: int = 16) -> str:
    """Cryptographically secure lowercase hex string of length characters."""
    if length < 0:
        raise InvalidArgumentError(
            f"length must be zero or greater, got {length}", "length",
        )
    num_bytes = length // 2
    try:
        return secrets.token_hex(num_bytes)
    except (NotImplementedError, OSError) as exc:
        raise InsufficientEntropyError(num_bytes) from exc
