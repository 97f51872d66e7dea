"""Shared hash fixtures."""

from __future__ import annotations

import pytest

# Ascending hex digits: every sliding 3-token is an increasing run.
ASCENDING = "0123456789abcdef" * 4
# Descending hex digits: shares no 3-token with ASCENDING.
DESCENDING = "fedcba9876543210" * 4
# Shares exactly "abc" with ASCENDING at size 3.
ABC_PREFIXED = "abc" + "0" * 61


@pytest.fixture
def ascending() -> str:
    return ASCENDING


@pytest.fixture
def descending() -> str:
    return DESCENDING


@pytest.fixture
def abc_prefixed() -> str:
    return ABC_PREFIXED
