"""Token intersection between a guessed hash and a fetched block hash."""

from __future__ import annotations

from typing import Dict, List, Sequence

from blockguess.errors import RangeError
from blockguess.models import MatchPolicy, MatchResult, TokenMatch


def _first_indices(tokens: Sequence[str]) -> Dict[str, int]:
    indices: Dict[str, int] = {}
    for index, token in enumerate(tokens):
        indices.setdefault(token, index)
    return indices


def _match_set(a: Sequence[str], b: Sequence[str]) -> List[TokenMatch]:
    in_b = _first_indices(b)
    matches: List[TokenMatch] = []
    seen: set[str] = set()
    for index, token in enumerate(a):
        if token in seen or token not in in_b:
            continue
        seen.add(token)
        matches.append(TokenMatch(token=token, index_a=index, index_b=in_b[token]))
    return matches


def _match_positional(a: Sequence[str], b: Sequence[str], strict: bool) -> List[TokenMatch]:
    if strict and len(a) != len(b):
        raise RangeError(
            f"Positional comparison requires equal lengths, got {len(a)} and {len(b)}"
        )
    return [
        TokenMatch(token=left, index_a=index, index_b=index)
        for index, (left, right) in enumerate(zip(a, b))
        if left == right
    ]


def find_matches(
    a: Sequence[str],
    b: Sequence[str],
    policy: MatchPolicy = MatchPolicy.SET,
    *,
    strict: bool = False,
) -> MatchResult:
    """Return the tokens present in both ``a`` and ``b``.

    ``SET`` keeps distinct values in first-occurrence order of ``a``.
    ``POSITIONAL`` compares index by index over the shorter sequence, or
    raises ``RangeError`` on a length mismatch when ``strict`` is set.
    """
    policy = MatchPolicy.coerce(policy)
    if policy is MatchPolicy.POSITIONAL:
        matches = _match_positional(a, b, strict)
    else:
        matches = _match_set(a, b)
    return MatchResult(policy=policy, matches=matches)
