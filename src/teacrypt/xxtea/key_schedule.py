"""Normalize a key of any length into four 32-bit words."""

from __future__ import annotations

from teacrypt.errors import EmptyKeyError
from teacrypt.xxtea.codec import encode_words

KEY_WORDS = 4


def normalize_key(key: bytes | str) -> tuple[int, int, int, int]:
    """Return the four key words used by the mixing engine.

    Short keys are zero-filled. Bytes past the 16th are dropped: the mixer
    only ever indexes ``k[0..3]``.
    """
    if isinstance(key, str):
        key = key.encode("utf-8")
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise EmptyKeyError(f"Key must be bytes or str, got {type(key).__name__}")
    if not len(key):
        raise EmptyKeyError("Key must not be empty")

    words = encode_words(bytes(key[:KEY_WORDS * 4]), with_length=False)
    words.extend([0] * (KEY_WORDS - len(words)))
    return tuple(words)
