"""Split hex hashes into fixed-size tokens.

Both sides of a single verification must be tokenized with the same mode;
mixing modes is a caller error and is not detected here.
"""

from __future__ import annotations

import math
from typing import List

from blockguess.errors import RangeError
from blockguess.models import TokenizeMode


def _check_size(value: str, size: int) -> None:
    if size <= 0:
        raise RangeError(f"Token size must be positive, got {size}")
    if size > len(value):
        raise RangeError(f"Token size {size} exceeds hash length {len(value)}")


def tokenize_sliding_window(value: str, size: int) -> List[str]:
    """Overlapping tokens starting at every position: ``len(value) - size + 1`` of them."""
    _check_size(value, size)
    return [value[start : start + size] for start in range(len(value) - size + 1)]


def tokenize_chunked(value: str, size: int) -> List[str]:
    """Non-overlapping tokens; the last one may be shorter than ``size``."""
    _check_size(value, size)
    count = math.ceil(len(value) / size)
    return [value[index * size : (index + 1) * size] for index in range(count)]


def tokenize(value: str, size: int, mode: TokenizeMode = TokenizeMode.SLIDING) -> List[str]:
    if TokenizeMode.coerce(mode) is TokenizeMode.CHUNKED:
        return tokenize_chunked(value, size)
    return tokenize_sliding_window(value, size)
