"""
Deterministic base36 hashing for ID hash segments.

SHA-256 the input, read the first 8 digest bytes as a big-endian unsigned
64-bit integer, encode it in lowercase base36, then truncate or left-pad
with '0' to the requested length. No state, no randomness.
"""

import hashlib

# Must match exactly across implementations for IDs to interoperate
BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def digest_u64(data: bytes) -> int:
    """
    Return the first 8 bytes of SHA-256(data) as a big-endian unsigned int.

    Example:
        >>> digest_u64(b"hello")
        3238736544897475342
    """
    return int.from_bytes(hashlib.sha256(data).digest()[:8], "big")


def base36_encode(value: int) -> str:
    """
    Encode a non-negative integer as a lowercase base36 string.

    Example:
        >>> base36_encode(35), base36_encode(36)
        ('z', '10')
    """
    if value < 0:
        raise ValueError("base36_encode requires a non-negative integer")
    if value == 0:
        return "0"

    chars = []
    while value:
        value, remainder = divmod(value, 36)
        chars.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(chars))


def hash_bytes(data: bytes | str, length: int) -> str:
    """
    Hash ``data`` into a base36 string of exactly ``length`` characters.

    Strings are encoded as UTF-8 first. The 64-bit digest encodes to at most
    13 base36 characters; longer requests are left-padded with '0'.

    Args:
        data: Bytes to hash (str is UTF-8 encoded)
        length: Number of characters to return (>= 1)

    Returns:
        Base36 hash segment of the requested length

    Example:
        >>> len(hash_bytes(b"test", 6))
        6
    """
    if length < 1:
        raise ValueError(f"Hash length must be at least 1, got {length}")
    if isinstance(data, str):
        data = data.encode("utf-8")

    encoded = base36_encode(digest_u64(data))
    if len(encoded) >= length:
        return encoded[:length]
    return encoded.rjust(length, "0")
