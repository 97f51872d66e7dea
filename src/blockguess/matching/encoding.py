"""Match encodings handed to the on-chain claim step, and claim selection."""

from __future__ import annotations

from typing import List, Sequence

from eth_abi import encode

from blockguess.errors import FormatError, RangeError
from blockguess.hashing.normalizer import normalize
from blockguess.models import HitSpan, MatchResult, TokenMatch

# uint8 positions
MAX_SPAN_POSITION = 255

HIT_SPAN_TYPES = ["uint8", "uint8", "bool", "bool", "uint8", "uint8", "bool", "bool"]


def encode_match_list(result: MatchResult) -> str:
    """Compact ``"index:token,index:token"`` form, indexed on the guess side."""
    return ",".join(f"{match.index_a}:{match.token}" for match in result.matches)


def decode_match_list(encoded: str) -> List[TokenMatch]:
    matches: List[TokenMatch] = []
    if not encoded.strip():
        return matches

    for entry in encoded.split(","):
        index, sep, token = entry.strip().partition(":")
        if not sep or not token or not index.isdecimal():
            raise FormatError(f"Malformed match entry: {entry!r}")
        matches.append(TokenMatch(token=token, index_a=int(index), index_b=int(index)))
    return matches


def hit_span(value: str, token: str) -> HitSpan:
    """Locate the first occurrence of ``token`` in a hash."""
    cleaned = normalize(value, expected_length=None)
    start = cleaned.find(token.lower())
    if start < 0:
        raise FormatError(f"Token {token!r} does not occur in hash")
    end = start + len(token) - 1
    return HitSpan(
        start=start,
        end=end,
        left_skip=start > 0,
        right_skip=start + len(token) < len(cleaned),
    )


def encode_hit_spans(result: MatchResult, guess_hash: str, fetched_hash: str) -> str:
    """ABI-encode where the first two matches sit in the guessed and fetched hashes.

    With a single match, that token is located on both sides.
    """
    if not result.matches:
        raise RangeError("Cannot encode hit spans without any match")

    tokens = result.tokens
    first = hit_span(guess_hash, tokens[0])
    second = hit_span(fetched_hash, tokens[1] if len(tokens) > 1 else tokens[0])
    if max(first.end, second.end) > MAX_SPAN_POSITION:
        raise RangeError(f"Hit span positions must fit in uint8 (<= {MAX_SPAN_POSITION})")
    payload = encode(
        HIT_SPAN_TYPES,
        [
            first.start,
            first.end,
            first.left_skip,
            first.right_skip,
            second.start,
            second.end,
            second.left_skip,
            second.right_skip,
        ],
    )
    return "0x" + payload.hex()


def toggle_selection(selected: Sequence[str], token: str, limit: int) -> List[str]:
    """Add ``token`` to the claim selection, or remove it if already selected."""
    if limit <= 0:
        raise RangeError(f"Selection limit must be positive, got {limit}")

    current = list(selected)
    if token in current:
        current.remove(token)
        return current
    if len(current) >= limit:
        raise RangeError(f"You can only select up to {limit} matches")
    current.append(token)
    return current
