"""
Entropy extraction: SHA-512 digest source and mixed-radix entropy pool.
"""

from src.core.entropy.digest import DIGEST_BITS, DIGEST_BOUND, sha512_digest, sha512_int
from src.core.entropy.pool import (
    INITIAL_MAX,
    EntropyError,
    EntropyExhausted,
    EntropyPool,
    InvalidRange,
    WeightSumZero,
    select_weighted,
)

__all__ = [
    # Digest
    "DIGEST_BITS",
    "DIGEST_BOUND",
    "sha512_digest",
    "sha512_int",
    # Pool
    "INITIAL_MAX",
    "EntropyPool",
    "select_weighted",
    # Exceptions
    "EntropyError",
    "EntropyExhausted",
    "InvalidRange",
    "WeightSumZero",
]
