"""Error kinds raised by the hash-matching core."""

from __future__ import annotations


class BlockGuessError(ValueError):
    """Base class for every precondition violation raised by blockguess."""


class FormatError(BlockGuessError):
    """Malformed or wrong-length hex input."""


class RangeError(BlockGuessError):
    """A numeric argument (token size, block number, threshold...) is out of range."""
