"""Off-chain guess verification pipeline."""

from __future__ import annotations

import logging
from typing import Callable, List, Tuple

from blockguess.config import AppConfig
from blockguess.errors import RangeError
from blockguess.hashing.normalizer import normalize
from blockguess.hashing.tokenizer import tokenize
from blockguess.matching.distance import block_distance, classify
from blockguess.matching.encoding import encode_hit_spans, encode_match_list
from blockguess.matching.matcher import find_matches
from blockguess.matching.offset import derive_offset
from blockguess.models import MatchResult, VerificationResult

LOGGER = logging.getLogger(__name__)

BlockHashFetcher = Callable[[int], str]


class Verifier:
    """Runs normalize, tokenize, match and classify over one guess.

    In complex mode a guess without enough matches is retried once against
    the block derived from the fetched hash. Fetching that block is delegated
    to ``fetch_block_hash``; without one the derived block is reported and
    the result is flagged ``pending_refetch``.

    A target block that is not mined yet, or that lies further behind the
    chain head than the configured window for the mode, is refused with
    ``RangeError``.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        fetch_block_hash: BlockHashFetcher | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.fetch_block_hash = fetch_block_hash

    def tokens(self, value: str) -> List[str]:
        return tokenize(value, self.config.token_size, self.config.tokenize_mode)

    def _compare(self, guess: str, fetched: str) -> MatchResult:
        result = find_matches(self.tokens(guess), self.tokens(fetched), self.config.match_policy)
        LOGGER.debug("Compared %s against %s: %d match(es)", guess, fetched, result.count)
        return result

    def _acceptable(self, result: MatchResult) -> bool:
        return result.count >= self.config.min_matches

    def verify(
        self,
        guess_hash: str,
        fetched_hash: str,
        target_block: int,
        current_block: int,
        *,
        complex_mode: bool = False,
    ) -> VerificationResult:
        length = self.config.hash_length
        guess = normalize(guess_hash, length)
        fetched = normalize(fetched_hash, length)

        if target_block > current_block:
            raise RangeError(
                f"Target block {target_block} has not been mined yet (current block {current_block})"
            )
        distance = block_distance(target_block, current_block)
        max_distance = self.config.max_distance_for(complex_mode)
        if distance > max_distance:
            raise RangeError(
                f"Block distance is {distance} blocks; it must be within {max_distance} blocks"
            )
        classification = classify(distance, self.config.thresholds_for(complex_mode))
        LOGGER.debug("Block distance %d classified as %s", distance, classification.bucket.value)

        block_number = target_block
        matches = self._compare(guess, fetched)
        offset = None
        retried = False
        pending = False

        if complex_mode and not self._acceptable(matches):
            offset = derive_offset(fetched, target_block, self.config.complex_modulus)
            LOGGER.info(
                "No acceptable match at block %d, derived block %d (byte 0x%s)",
                target_block,
                offset.derived_block,
                offset.byte_hex,
            )
            if self.fetch_block_hash is None:
                pending = True
            else:
                fetched, block_number = self._refetch(self.fetch_block_hash, offset.derived_block)
                matches = self._compare(guess, fetched)
                retried = True

        return VerificationResult(
            guess_hash=guess,
            fetched_hash=fetched,
            target_block=target_block,
            block_number=block_number,
            token_size=self.config.token_size,
            mode=self.config.tokenize_mode,
            classification=classification,
            matches=matches,
            offset=offset,
            retried=retried,
            pending_refetch=pending,
            encoded_match=encode_match_list(matches),
            hit_spans=encode_hit_spans(matches, guess, fetched) if matches else "",
        )

    def _refetch(self, fetch: BlockHashFetcher, block_number: int) -> Tuple[str, int]:
        raw = fetch(block_number)
        return normalize(raw, self.config.hash_length), block_number
