"""Block-distance risk classification."""

from __future__ import annotations

from typing import Sequence

from blockguess.errors import RangeError
from blockguess.models import DistanceClassification, RiskBucket

_ORDERED_BUCKETS = (
    RiskBucket.DARK_GREEN,
    RiskBucket.LIGHT_GREEN,
    RiskBucket.LIGHT_RED,
)


def _check_thresholds(thresholds: Sequence[int]) -> None:
    if len(thresholds) != 3:
        raise RangeError(f"Expected three thresholds, got {len(thresholds)}")
    if any(limit < 0 for limit in thresholds):
        raise RangeError(f"Thresholds must be non-negative: {list(thresholds)}")
    if not thresholds[0] <= thresholds[1] <= thresholds[2]:
        raise RangeError(f"Thresholds must be non-decreasing: {list(thresholds)}")


def block_distance(target_block: int, current_block: int) -> int:
    """Absolute number of blocks between the target and the chain head."""
    if target_block < 0 or current_block < 0:
        raise RangeError("Block numbers must be non-negative")
    return abs(current_block - target_block)


def classify(distance: int, thresholds: Sequence[int]) -> DistanceClassification:
    """Map ``distance`` onto a risk bucket using the ``(t1, t2, t3)`` limits."""
    if distance < 0:
        raise RangeError(f"Distance must be non-negative, got {distance}")
    _check_thresholds(thresholds)

    bucket = RiskBucket.DARK_RED
    for limit, candidate in zip(thresholds, _ORDERED_BUCKETS):
        if distance <= limit:
            bucket = candidate
            break

    return DistanceClassification(
        distance=distance,
        bucket=bucket,
        level=bucket.level,
        color=bucket.color,
    )
