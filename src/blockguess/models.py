"""Core blockguess data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from blockguess.errors import FormatError


class TokenizeMode(str, Enum):
    """How a hash is cut into tokens."""

    SLIDING = "sliding"
    CHUNKED = "chunked"

    @classmethod
    def coerce(cls, value: TokenizeMode | str) -> TokenizeMode:
        try:
            return cls(value)
        except ValueError as exc:
            raise FormatError(f"Unknown tokenize mode: {value!r}") from exc


class MatchPolicy(str, Enum):
    """How two token sequences are compared."""

    SET = "set"
    POSITIONAL = "positional"

    @classmethod
    def coerce(cls, value: MatchPolicy | str) -> MatchPolicy:
        try:
            return cls(value)
        except ValueError as exc:
            raise FormatError(f"Unknown match policy: {value!r}") from exc


class RiskBucket(str, Enum):
    """Qualitative block-distance risk, from safest to riskiest."""

    DARK_GREEN = "dark green"
    LIGHT_GREEN = "light green"
    LIGHT_RED = "light red"
    DARK_RED = "dark red"

    @property
    def level(self) -> int:
        return _BUCKET_LEVELS[self]

    @property
    def color(self) -> str:
        return _BUCKET_COLORS[self]


_BUCKET_LEVELS = {
    RiskBucket.DARK_GREEN: 1,
    RiskBucket.LIGHT_GREEN: 2,
    RiskBucket.LIGHT_RED: 3,
    RiskBucket.DARK_RED: 4,
}

_BUCKET_COLORS = {
    RiskBucket.DARK_GREEN: "#10b981",
    RiskBucket.LIGHT_GREEN: "#34d399",
    RiskBucket.LIGHT_RED: "#f87171",
    RiskBucket.DARK_RED: "#dc2626",
}


@dataclass(slots=True)
class TokenMatch:
    """A token found on both sides, with the first index it occupies in each."""

    token: str
    index_a: int
    index_b: int


@dataclass(slots=True)
class MatchResult:
    """Tokens shared by two token sequences."""

    policy: MatchPolicy
    matches: List[TokenMatch] = field(default_factory=list)

    @property
    def tokens(self) -> List[str]:
        return [match.token for match in self.matches]

    @property
    def count(self) -> int:
        return len(self.matches)

    def __bool__(self) -> bool:
        return bool(self.matches)


@dataclass(slots=True)
class DistanceClassification:
    distance: int
    bucket: RiskBucket
    level: int
    color: str


@dataclass(frozen=True, slots=True)
class ComplexOffset:
    """Secondary block derived from one byte of a seed hash in complex mode."""

    seed_hash: str
    target_block: int
    modulus: int
    byte_hex: str
    byte_value: int
    offset: int
    derived_block: int


@dataclass(slots=True)
class HitSpan:
    """Character span of a matched token inside a hash."""

    start: int
    end: int
    left_skip: bool
    right_skip: bool


@dataclass(slots=True)
class GuessSubmission:
    """Fields of the guess form as entered by the user."""

    actual_hash: str = ""
    secret_hash: str = ""
    dummy_hash: str = ""
    token_size: int = 0
    block_increment: int = 0


@dataclass(slots=True)
class VerificationResult:
    """Everything one off-chain verification attempt produced."""

    guess_hash: str
    fetched_hash: str
    target_block: int
    block_number: int
    token_size: int
    mode: TokenizeMode
    classification: DistanceClassification
    matches: MatchResult
    offset: ComplexOffset | None = None
    retried: bool = False
    pending_refetch: bool = False
    encoded_match: str = ""
    hit_spans: str = ""

    @property
    def matched(self) -> bool:
        return bool(self.matches)
