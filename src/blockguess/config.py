"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from blockguess.hashing.normalizer import HASH_LENGTH
from blockguess.models import MatchPolicy, TokenizeMode


@dataclass(slots=True)
class AppConfig:
    token_size: int = 3
    tokenize_mode: TokenizeMode = TokenizeMode.SLIDING
    match_policy: MatchPolicy = MatchPolicy.SET
    simple_thresholds: Tuple[int, int, int] = (64, 128, 192)
    complex_thresholds: Tuple[int, int, int] = (32, 64, 96)
    complex_modulus: int = 256
    min_matches: int = 1
    selection_limit: int = 2
    hash_length: int = HASH_LENGTH
    min_token_size: int = 3
    max_token_size: int = 64
    min_block_increment: int = 10
    max_block_increment: int = 2048
    max_simple_distance: int = 255
    max_complex_distance: int = 128

    def __post_init__(self) -> None:
        self.tokenize_mode = TokenizeMode.coerce(self.tokenize_mode)
        self.match_policy = MatchPolicy.coerce(self.match_policy)
        self.simple_thresholds = tuple(self.simple_thresholds)
        self.complex_thresholds = tuple(self.complex_thresholds)

    def thresholds_for(self, complex_mode: bool) -> Tuple[int, int, int]:
        return self.complex_thresholds if complex_mode else self.simple_thresholds

    def max_distance_for(self, complex_mode: bool) -> int:
        return self.max_complex_distance if complex_mode else self.max_simple_distance
