"""Tests for application configuration."""

from __future__ import annotations

import pytest

from blockguess.config import AppConfig
from blockguess.errors import FormatError
from blockguess.models import MatchPolicy, TokenizeMode


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.token_size == 3
        assert config.tokenize_mode is TokenizeMode.SLIDING
        assert config.match_policy is MatchPolicy.SET
        assert config.simple_thresholds == (64, 128, 192)
        assert config.complex_thresholds == (32, 64, 96)
        assert config.complex_modulus == 256
        assert config.selection_limit == 2
        assert config.hash_length == 64
        assert config.max_simple_distance == 255
        assert config.max_complex_distance == 128

    def test_custom_config(self) -> None:
        """Should coerce plain values into enums and tuples."""
        config = AppConfig(
            token_size=5,
            tokenize_mode="chunked",  # type: ignore[arg-type]
            match_policy="positional",  # type: ignore[arg-type]
            simple_thresholds=[2, 10, 256],  # type: ignore[arg-type]
        )

        assert config.token_size == 5
        assert config.tokenize_mode is TokenizeMode.CHUNKED
        assert config.match_policy is MatchPolicy.POSITIONAL
        assert config.simple_thresholds == (2, 10, 256)

    def test_thresholds_for(self) -> None:
        config = AppConfig()

        assert config.thresholds_for(False) == (64, 128, 192)
        assert config.thresholds_for(True) == (32, 64, 96)

    def test_max_distance_for(self) -> None:
        config = AppConfig(max_simple_distance=300)

        assert config.max_distance_for(False) == 300
        assert config.max_distance_for(True) == 128

    def test_unknown_mode(self) -> None:
        """Should reject unknown mode and policy values with FormatError."""
        with pytest.raises(FormatError):
            AppConfig(tokenize_mode="bogus")  # type: ignore[arg-type]
        with pytest.raises(FormatError):
            AppConfig(match_policy="bogus")  # type: ignore[arg-type]
