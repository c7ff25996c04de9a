"""Byte buffer <-> little-endian 32-bit word conversion."""

from __future__ import annotations

import struct

from teacrypt.errors import MalformedLengthError

MASK = 0xFFFFFFFF


def encode_words(data: bytes, with_length: bool) -> list[int]:
    """Unpack ``data`` into little-endian u32 words.

    The buffer is zero-padded to a multiple of 4 first. With ``with_length``
    an extra word holding ``len(data)`` is appended so the padding can be
    stripped again by :func:`decode_words`.
    """
    n = len(data)
    if with_length and n > MASK:
        raise ValueError(f"Buffer too long for a 32-bit length word: {n} bytes")
    padded = bytes(data) + b"\0" * (-n & 3)
    words = list(struct.unpack(f"<{len(padded) >> 2}I", padded))
    if with_length:
        words.append(n)
    return words


def decode_words(words: list[int], with_length: bool) -> bytes:
    """Pack words back into bytes.

    With ``with_length`` the last word is the true byte length ``m`` and must
    lie within the final data word, i.e. ``n - 3 <= m <= n`` where
    ``n = 4 * (len(words) - 1)``. The result is truncated to ``m`` bytes.

    Raises:
        MalformedLengthError: if the length word is out of range.
    """
    if with_length:
        if not words:
            raise MalformedLengthError("No length word in an empty word buffer")
        n = (len(words) - 1) << 2
        m = words[-1]
        if m < n - 3 or m > n:
            raise MalformedLengthError(
                f"Length word {m} outside valid range [{max(n - 3, 0)}, {n}]"
            )
        return struct.pack(f"<{len(words) - 1}I", *words[:-1])[:m]
    return struct.pack(f"<{len(words)}I", *words)
