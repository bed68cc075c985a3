"""Fast hashing for script registry keys.

Scripts registered without an explicit key are keyed by the digest of their
body, so registering the same script twice in one bucket stores it once.
"""

from typing import Protocol
from enum import Enum
import hashlib

import xxhash


class Algorithm(str, Enum):
    """Supported hash algorithms."""

    XXHASH64 = "xxhash64"  # Fast, non-cryptographic (script keys)
    MD5 = "md5"  # Matches keys produced by PHP-side page registries


class Hasher(Protocol):
    """Protocol for hash implementations."""

    def digest(self, data: bytes) -> str:
        """Compute hex digest of data."""
        ...


class XXHasher:
    """Ultra-fast non-cryptographic hasher."""

    def digest(self, data: bytes) -> str:
        """Compute xxhash64 hex digest."""
        return xxhash.xxh64(data).hexdigest()


class MD5Hasher:
    def digest(self, data: bytes) -> str:
        return hashlib.md5(data, usedforsecurity=False).hexdigest()


def create_hasher(algorithm: Algorithm = Algorithm.XXHASH64) -> Hasher:
    """
    Create hasher instance.

    Args:
        algorithm: Hash algorithm to use

    Returns:
        Hasher instance

    Raises:
        ValueError: If the algorithm is unknown
    """
    if algorithm == Algorithm.XXHASH64:
        return XXHasher()
    elif algorithm == Algorithm.MD5:
        return MD5Hasher()
    else:
        raise ValueError(f"Unknown algorithm: {algorithm}")


def hash_string(text: str, algorithm: Algorithm = Algorithm.XXHASH64) -> str:
    """
    Hash string to hex digest.

    Args:
        text: String to hash
        algorithm: Hash algorithm (default: xxhash64 for speed)

    Returns:
        Hex digest string

    Examples:
        >>> len(hash_string("jQuery('#w0').multipleInput({});"))
        16
    """
    return create_hasher(algorithm).digest(text.encode("utf-8"))


__all__ = [
    "Algorithm",
    "Hasher",
    "create_hasher",
    "hash_string",
]
