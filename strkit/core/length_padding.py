"""Length & Padding - truncation, padding, fixed-width splitting, repetition.

Invariants:
    - truncate appends suffix only when the text is longer than length
    - pad_string never shortens its input
    - split_by_length chunks concatenate back to the input, each len <= length
    - repeat/split_by_length/pad_string raise InvalidArgumentError, never return garbage
"""

from strkit.core.domain_types import PadType
from strkit.core.errors import InvalidArgumentError


def truncate(s: str, length: int = 100, suffix: str = "...") -> str:
    """Cut s to length characters and append suffix if it was longer.

    The suffix is not counted against length:
    truncate("Hello World", 5) == "Hello...".
    """
    if len(s) > length:
        return s[:length] + suffix
    return s


def _fill(pad: str, count: int) -> str:
    """count characters of pad repeated, last repetition partial."""
    repeats = -(-count // len(pad))
    return (pad * repeats)[:count]


def pad_string(
    s: str,
    length: int,
    pad: str = " ",
    pad_type: PadType | str = PadType.RIGHT,
) -> str:
    """Pad s with repetitions of pad until it is length characters long.

    BOTH puts floor(n/2) padding characters on the left and the rest on the
    right. Strings already at or beyond length are returned unchanged.
    """
    if not pad:
        raise InvalidArgumentError("pad must be a non-empty string", "pad")
    try:
        pad_type = PadType(pad_type)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"pad_type must be one of {[p.value for p in PadType]}, got {pad_type!r}",
            "pad_type",
        ) from exc

    missing = length - len(s)
    if missing <= 0:
        return s

    if pad_type is PadType.LEFT:
        return _fill(pad, missing) + s
    if pad_type is PadType.RIGHT:
        return s + _fill(pad, missing)
    left = missing // 2
    return _fill(pad, left) + s + _fill(pad, missing - left)


def split_by_length(s: str, length: int) -> list[str]:
    if length <= 0:
        raise InvalidArgumentError(
            f"length must be greater than zero, got {length}", "length",
        )
    return [s[i:i + length] for i in range(0, len(s), length)]


def repeat(s: str, times: int) -> str:
    if times < 0:
        raise InvalidArgumentError(
            f"times must be zero or greater, got {times}", "times",
        )
    return s * times
