"""Domain Types - small rich types shared by the string operations.

Invariants:
    - Percentage is bounded 0.0-100.0
    - Text is encoded with DEFAULT_ENCODING whenever an operation needs bytes
    - PadType values serialize to plain strings
"""

from enum import Enum
from typing import NewType


DEFAULT_ENCODING = "utf-8"

Percentage = NewType("Percentage", float)   # 0.0-100.0


class PadType(str, Enum):
    """Which side(s) pad_string fills."""
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"
