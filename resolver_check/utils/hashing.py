"""Content hashing helpers for the allowlist endpoint."""

import hashlib

import xxhash


def fast_hash(data: str) -> str:
    """Compute a fast XXH3-64 hash for cache validation.

    Not suitable for security purposes.

    Args:
        data: Text to hash (UTF-8 encoded).

    Returns:
        str: Lowercase hex digest without zero padding.
    """
    return format(xxhash.xxh3_64_intdigest(data.encode("utf-8")), "x")


def secure_hash(data: str, length: int) -> str:
    """Compute a SHA-3 family hash of the given data.

    Args:
        data: Text to hash (UTF-8 encoded).
        length: Output length in bytes for SHAKE256. Zero or negative selects
            SHA3-256 (32 bytes) instead.

    Returns:
        str: Hex digest, ``2 * length`` characters (64 for SHA3-256).

    Examples:
        >>> len(secure_hash("test", 16))
        32
        >>> len(secure_hash("test", 0))
        64
    """
    encoded = data.encode("utf-8")
    if length > 0:
        return hashlib.shake_256(encoded).hexdigest(length)
    return hashlib.sha3_256(encoded).hexdigest()
