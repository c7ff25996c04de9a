"""Base classes for cipher adapters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CipherInfo:
    name: str
    description: str
    block_aligned: bool = False


class CipherAdapter(ABC):
    """Abstract base class for symmetric ciphers with a bytes-in/bytes-out API."""

    @abstractmethod
    def encrypt(self, data: bytes, key: bytes | str) -> bytes:
        """Encrypt ``data`` under ``key``."""
        ...

    @abstractmethod
    def decrypt(self, data: bytes, key: bytes | str) -> bytes:
        """Decrypt ``data`` under ``key``. Raises a CryptError on bad input."""
        ...

    @classmethod
    @abstractmethod
    def info(cls) -> CipherInfo:
        """Return metadata about this cipher."""
        ...
