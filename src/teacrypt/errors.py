"""Typed exceptions for cipher failures.

Every error carries a short ``code`` string, so "bad key" can be told apart
from "bad ciphertext" without parsing messages.
"""

from __future__ import annotations


class CryptError(ValueError):
    """Base exception for all cipher errors."""

    code = "crypt_error"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class EmptyKeyError(CryptError):
    """The key is empty or is not a byte buffer."""

    code = "empty_key"


class MalformedLengthError(CryptError):
    """The length word recovered on decryption is out of range."""

    code = "malformed_length"


class CiphertextLengthError(CryptError):
    """Ciphertext is not a whole number of words, or shorter than one block."""

    code = "ciphertext_length"


class UnknownCipherError(CryptError):
    """No cipher adapter is registered under the requested name."""

    code = "unknown_cipher"
