"""Cipher registry: look up adapters by name."""

from __future__ import annotations

from teacrypt.adapters.base import CipherAdapter, CipherInfo
from teacrypt.errors import UnknownCipherError


class CipherRegistry:
    """Registry of available cipher adapters."""

    _ciphers: dict[str, type[CipherAdapter]] = {}

    @classmethod
    def register(cls, cipher_cls: type[CipherAdapter]) -> type:
        info = cipher_cls.info()
        cls._ciphers[info.name] = cipher_cls
        return cipher_cls

    @classmethod
    def get(cls, name: str) -> type[CipherAdapter] | None:
        return cls._ciphers.get(name)

    @classmethod
    def all_ciphers(cls) -> dict[str, type[CipherAdapter]]:
        return dict(cls._ciphers)


def create_cipher(name: str) -> CipherAdapter:
    """Instantiate the adapter registered under ``name``."""
    cipher_cls = CipherRegistry.get(name)
    if cipher_cls is None:
        known = ", ".join(sorted(CipherRegistry.all_ciphers())) or "none"
        raise UnknownCipherError(f"Unknown cipher '{name}' (available: {known})")
    return cipher_cls()


# Built-in adapters register themselves on import.
from teacrypt.adapters import xxtea as _xxtea  # noqa: E402,F401

__all__ = ["CipherAdapter", "CipherInfo", "CipherRegistry", "create_cipher"]
