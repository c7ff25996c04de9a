"""XXTEA mixing rounds over a block of 32-bit words.

Every intermediate value is masked to 32 bits, matching C implementations
built on unsigned wraparound.
"""

from __future__ import annotations

from collections.abc import Sequence

from teacrypt.xxtea.codec import MASK

DELTA = 0x9E3779B9


def round_count(word_count: int) -> int:
    """Number of full passes over a block of ``word_count`` words."""
    return 6 + 52 // word_count


def _mx(z: int, y: int, sum_val: int, p: int, e: int, key: Sequence[int]) -> int:
    left = (((z >> 5) ^ (y << 2) & MASK) + ((y >> 3) ^ (z << 4) & MASK)) & MASK
    right = ((sum_val ^ y) + (key[(p & 3) ^ e] ^ z)) & MASK
    return left ^ right


def encrypt_block(v: list[int], key: Sequence[int]) -> list[int]:
    """Encrypt a block of words in place.

    Args:
        v: At least two 32-bit words. Modified in place.
        key: Four 32-bit key words.

    Returns:
        The same list, for convenience.
    """
    if len(v) < 2:
        raise ValueError(f"XXTEA block needs at least 2 words, got {len(v)}")
    n = len(v) - 1
    z = v[n]
    sum_val = 0
    for _ in range(round_count(n + 1)):
        sum_val = (sum_val + DELTA) & MASK
        e = (sum_val >> 2) & 3
        for p in range(n):
            y = v[p + 1]
            z = v[p] = (v[p] + _mx(z, y, sum_val, p, e, key)) & MASK
        y = v[0]
        z = v[n] = (v[n] + _mx(z, y, sum_val, n, e, key)) & MASK
    return v


def decrypt_block(v: list[int], key: Sequence[int]) -> list[int]:
    """Decrypt a block of words in place (inverse of :func:`encrypt_block`)."""
    if len(v) < 2:
        raise ValueError(f"XXTEA block needs at least 2 words, got {len(v)}")
    n = len(v) - 1
    y = v[0]
    sum_val = (round_count(n + 1) * DELTA) & MASK
    while sum_val != 0:
        e = (sum_val >> 2) & 3
        for p in range(n, 0, -1):
            z = v[p - 1]
            y = v[p] = (v[p] - _mx(z, y, sum_val, p, e, key)) & MASK
        z = v[n]
        y = v[0] = (v[0] - _mx(z, y, sum_val, 0, e, key)) & MASK
        sum_val = (sum_val - DELTA) & MASK
    return v
