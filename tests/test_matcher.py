"""Tests for token matching."""

from __future__ import annotations

import pytest

from blockguess.errors import FormatError, RangeError
from blockguess.hashing.tokenizer import tokenize_sliding_window
from blockguess.matching.matcher import find_matches
from blockguess.models import MatchPolicy, TokenMatch


class TestSetPolicy:
    """Test set-based matching."""

    def test_example(self) -> None:
        """Should report the shared token with its index on both sides."""
        result = find_matches(["abc", "bcd"], ["xyz", "bcd"], MatchPolicy.SET)

        assert result.policy is MatchPolicy.SET
        assert result.matches == [TokenMatch(token="bcd", index_a=1, index_b=1)]

    def test_first_occurrence_indices(self) -> None:
        """Duplicates are reported once, at their first index."""
        result = find_matches(["aa", "bb", "aa"], ["cc", "aa", "aa", "bb"])

        assert result.matches == [
            TokenMatch(token="aa", index_a=0, index_b=1),
            TokenMatch(token="bb", index_a=1, index_b=3),
        ]

    def test_order_follows_first_sequence(self) -> None:
        result = find_matches(["c", "a", "b"], ["a", "b", "c"])

        assert result.tokens == ["c", "a", "b"]

    def test_no_matches(self, ascending: str, descending: str) -> None:
        """Ascending and descending runs share no 3-token."""
        result = find_matches(
            tokenize_sliding_window(ascending, 3),
            tokenize_sliding_window(descending, 3),
        )

        assert not result
        assert result.count == 0

    def test_single_match(self, abc_prefixed: str, ascending: str) -> None:
        result = find_matches(
            tokenize_sliding_window(abc_prefixed, 3),
            tokenize_sliding_window(ascending, 3),
        )

        assert result.matches == [TokenMatch(token="abc", index_a=0, index_b=10)]

    def test_symmetric_in_content(self, abc_prefixed: str, ascending: str) -> None:
        """Swapping the sides yields the same set of token values."""
        a = tokenize_sliding_window(ascending, 3)
        b = tokenize_sliding_window(ascending[::-1][:32] + abc_prefixed[:32], 3)

        assert set(find_matches(a, b).tokens) == set(find_matches(b, a).tokens)

    def test_idempotent(self, ascending: str) -> None:
        tokens = tokenize_sliding_window(ascending, 4)

        assert find_matches(tokens, tokens) == find_matches(tokens, tokens)

    def test_empty_side(self) -> None:
        assert not find_matches([], ["abc"])
        assert not find_matches(["abc"], [])


class TestPositionalPolicy:
    """Test index-by-index matching."""

    def test_matches_same_index_only(self) -> None:
        result = find_matches(["abc", "bcd", "cde"], ["abc", "cde", "cde"], MatchPolicy.POSITIONAL)

        assert result.policy is MatchPolicy.POSITIONAL
        assert result.matches == [
            TokenMatch(token="abc", index_a=0, index_b=0),
            TokenMatch(token="cde", index_a=2, index_b=2),
        ]

    def test_truncates_to_shorter(self) -> None:
        """Extra tokens on the longer side are ignored."""
        result = find_matches(["abc", "def", "123"], ["abc", "def"], MatchPolicy.POSITIONAL)

        assert result.tokens == ["abc", "def"]

    def test_strict_rejects_unequal_lengths(self) -> None:
        with pytest.raises(RangeError):
            find_matches(["abc", "def"], ["abc"], MatchPolicy.POSITIONAL, strict=True)

    def test_strict_equal_lengths(self) -> None:
        result = find_matches(["abc"], ["abc"], MatchPolicy.POSITIONAL, strict=True)

        assert result.tokens == ["abc"]

    def test_policy_by_value(self) -> None:
        result = find_matches(["abc", "x"], ["x", "abc"], "positional")

        assert not result

    def test_unknown_policy(self) -> None:
        with pytest.raises(FormatError):
            find_matches(["abc"], ["abc"], "bogus")
