"""Checks run on the guess form before a guess is submitted."""

from __future__ import annotations

from typing import List

from blockguess.config import AppConfig
from blockguess.hashing.normalizer import is_valid_format
from blockguess.models import GuessSubmission


def validate_submission(submission: GuessSubmission, config: AppConfig | None = None) -> List[str]:
    """Return every problem found in ``submission``; an empty list means valid."""
    config = config or AppConfig()
    errors: List[str] = []

    hashes = (
        ("Actual hash", submission.actual_hash),
        ("Secret key hash", submission.secret_hash),
        ("Dummy hash", submission.dummy_hash),
    )
    for label, value in hashes:
        if not value or not value.strip():
            errors.append(f"{label} is required.")
        elif not is_valid_format(value, config.hash_length):
            errors.append(
                f"{label} must be a valid {config.hash_length}-character hexadecimal string."
            )

    if not submission.token_size:
        errors.append("Token size is required.")
    elif not config.min_token_size <= submission.token_size <= config.max_token_size:
        errors.append(
            f"Token size must be between {config.min_token_size} and {config.max_token_size}."
        )
    elif submission.token_size > config.hash_length:
        errors.append("Token size cannot exceed the hash length.")

    if not config.min_block_increment <= submission.block_increment <= config.max_block_increment:
        errors.append(
            f"Block increment must be between {config.min_block_increment} "
            f"and {config.max_block_increment}."
        )

    return errors
