"""XXTEA encrypt/decrypt over whole byte buffers."""

from __future__ import annotations

from teacrypt.errors import CiphertextLengthError
from teacrypt.xxtea.codec import decode_words, encode_words
from teacrypt.xxtea.engine import decrypt_block, encrypt_block
from teacrypt.xxtea.key_schedule import normalize_key

# Two words: the smallest block the mixing rounds accept.
MIN_CIPHERTEXT_LEN = 8


def _check_data(data, name: str) -> None:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, got {type(data).__name__}")


def encrypt(plaintext: bytes, key: bytes | str) -> bytes:
    """Encrypt ``plaintext`` under ``key``.

    The output length is a multiple of 4 and always at least 8 bytes for
    non-empty input. Empty plaintext encrypts to empty output without
    touching the key.

    Raises:
        EmptyKeyError: if the key is empty.
    """
    _check_data(plaintext, "plaintext")
    if not len(plaintext):
        return b""
    k = normalize_key(key)
    v = encode_words(plaintext, with_length=True)
    return decode_words(encrypt_block(v, k), with_length=False)


def decrypt(ciphertext: bytes, key: bytes | str) -> bytes:
    """Decrypt ``ciphertext`` produced by :func:`encrypt` under ``key``.

    Raises:
        EmptyKeyError: if the key is empty.
        CiphertextLengthError: if the ciphertext is not a whole number of
            words or is shorter than one block.
        MalformedLengthError: if the recovered length word is invalid,
            which means a wrong key or corrupted ciphertext.
    """
    _check_data(ciphertext, "ciphertext")
    if not len(ciphertext):
        return b""
    k = normalize_key(key)
    n = len(ciphertext)
    if n & 3:
        raise CiphertextLengthError(
            f"Ciphertext length {n} is not a multiple of 4"
        )
    if n < MIN_CIPHERTEXT_LEN:
        raise CiphertextLengthError(
            f"Ciphertext length {n} is shorter than one block ({MIN_CIPHERTEXT_LEN} bytes)"
        )
    v = encode_words(ciphertext, with_length=False)
    return decode_words(decrypt_block(v, k), with_length=True)
