"""Hex hash normalization and format checks."""

from __future__ import annotations

import string

from blockguess.errors import FormatError

HASH_LENGTH = 64
_HEX_DIGITS = frozenset(string.hexdigits)


def normalize(value: str, expected_length: int | None = HASH_LENGTH) -> str:
    """Return the canonical form of a hex hash: no ``0x`` prefix, lowercase.

    Pass ``expected_length=None`` to accept any non-empty hex string.
    """
    if value is None:
        raise FormatError("Hash is required")

    cleaned = value.strip()
    if cleaned[:2] in ("0x", "0X"):
        cleaned = cleaned[2:]

    if not cleaned:
        raise FormatError("Hash is empty")
    if any(char not in _HEX_DIGITS for char in cleaned):
        raise FormatError(f"Hash contains non-hexadecimal characters: {value!r}")
    if expected_length is not None and len(cleaned) != expected_length:
        raise FormatError(
            f"Hash must be {expected_length} hexadecimal characters, got {len(cleaned)}"
        )
    return cleaned.lower()


def is_valid_format(value: str, expected_length: int | None = HASH_LENGTH) -> bool:
    """Check whether ``value`` normalizes to exactly ``expected_length`` hex chars."""
    try:
        normalize(value, expected_length)
    except FormatError:
        return False
    return True


def with_prefix(value: str, expected_length: int | None = HASH_LENGTH) -> str:
    """Canonical hash with a ``0x`` prefix, as contract calls expect it."""
    return "0x" + normalize(value, expected_length)
