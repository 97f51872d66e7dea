"""Complex-mode secondary block derivation."""

from __future__ import annotations

from blockguess.errors import RangeError
from blockguess.hashing.normalizer import normalize
from blockguess.models import ComplexOffset

# First byte of the normalized seed hash.
SEED_BYTE_SLICE = slice(0, 2)


def derive_offset(seed_hash: str, target_block: int, modulus: int = 256) -> ComplexOffset:
    """Derive the block ``target_block - (seed byte % modulus)``.

    The seed byte is always the first byte of the normalized hash.
    """
    if modulus <= 0:
        raise RangeError(f"Modulus must be positive, got {modulus}")

    seed = normalize(seed_hash)
    byte_hex = seed[SEED_BYTE_SLICE]
    byte_value = int(byte_hex, 16)
    offset = byte_value % modulus
    derived_block = target_block - offset
    if derived_block < 0:
        raise RangeError(
            f"Derived block {derived_block} is negative "
            f"(target {target_block}, offset {offset})"
        )

    return ComplexOffset(
        seed_hash=seed,
        target_block=target_block,
        modulus=modulus,
        byte_hex=byte_hex,
        byte_value=byte_value,
        offset=offset,
        derived_block=derived_block,
    )
