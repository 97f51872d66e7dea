"""Tests for core data models."""

from __future__ import annotations

from blockguess.models import (
    DistanceClassification,
    MatchPolicy,
    MatchResult,
    RiskBucket,
    TokenMatch,
    TokenizeMode,
    VerificationResult,
)


class TestRiskBucket:
    """Test RiskBucket enum."""

    def test_levels_are_ordered(self) -> None:
        assert [bucket.level for bucket in RiskBucket] == [1, 2, 3, 4]

    def test_colors(self) -> None:
        assert RiskBucket.DARK_GREEN.color == "#10b981"
        assert RiskBucket.DARK_RED.color == "#dc2626"

    def test_value_lookup(self) -> None:
        assert RiskBucket("light red") is RiskBucket.LIGHT_RED


class TestMatchResult:
    """Test MatchResult dataclass."""

    def test_empty_is_falsy(self) -> None:
        result = MatchResult(policy=MatchPolicy.SET)

        assert not result
        assert result.count == 0
        assert result.tokens == []

    def test_tokens(self) -> None:
        result = MatchResult(
            policy=MatchPolicy.SET,
            matches=[TokenMatch("abc", 0, 3), TokenMatch("def", 1, 0)],
        )

        assert result
        assert result.count == 2
        assert result.tokens == ["abc", "def"]

    def test_equality(self) -> None:
        first = MatchResult(policy=MatchPolicy.SET, matches=[TokenMatch("abc", 0, 3)])
        second = MatchResult(policy=MatchPolicy.SET, matches=[TokenMatch("abc", 0, 3)])

        assert first == second


class TestVerificationResult:
    """Test VerificationResult dataclass."""

    def test_matched(self) -> None:
        classification = DistanceClassification(
            distance=0,
            bucket=RiskBucket.DARK_GREEN,
            level=1,
            color=RiskBucket.DARK_GREEN.color,
        )
        result = VerificationResult(
            guess_hash="a" * 64,
            fetched_hash="a" * 64,
            target_block=1,
            block_number=1,
            token_size=3,
            mode=TokenizeMode.SLIDING,
            classification=classification,
            matches=MatchResult(policy=MatchPolicy.SET, matches=[TokenMatch("aaa", 0, 0)]),
        )

        assert result.matched
        assert result.offset is None
        assert result.pending_refetch is False
