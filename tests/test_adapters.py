"""Tests for the cipher registry and the XXTEA adapter."""

import logging

import pytest

from teacrypt import xxtea
from teacrypt.adapters import CipherRegistry, create_cipher
from teacrypt.adapters.base import CipherAdapter, CipherInfo
from teacrypt.adapters.xxtea import XxteaAdapter
from teacrypt.errors import EmptyKeyError, MalformedLengthError, UnknownCipherError


def test_xxtea_registered():
    assert CipherRegistry.get("xxtea") is XxteaAdapter
    assert "xxtea" in CipherRegistry.all_ciphers()


def test_info():
    info = XxteaAdapter.info()
    assert info == CipherInfo(
        name="xxtea",
        description="XXTEA (Corrected Block TEA), whole message as one block",
        block_aligned=True,
    )


def test_create_cipher():
    cipher = create_cipher("xxtea")
    assert isinstance(cipher, XxteaAdapter)
    assert isinstance(cipher, CipherAdapter)


def test_create_unknown_cipher():
    with pytest.raises(UnknownCipherError, match="available: .*xxtea"):
        create_cipher("rot13")


def test_all_ciphers_returns_copy():
    ciphers = CipherRegistry.all_ciphers()
    ciphers.pop("xxtea")
    assert CipherRegistry.get("xxtea") is XxteaAdapter


def test_adapter_matches_core(key):
    cipher = create_cipher("xxtea")
    ciphertext = cipher.encrypt(b"Hello, XXTEA!", key)
    assert ciphertext == xxtea.encrypt(b"Hello, XXTEA!", key)
    assert cipher.decrypt(ciphertext, key) == b"Hello, XXTEA!"


def test_adapter_is_abstract_contract():
    """A subclass missing decrypt cannot be instantiated."""

    class HalfCipher(CipherAdapter):
        def encrypt(self, data, key):
            return data

        @classmethod
        def info(cls):
            return CipherInfo(name="half", description="incomplete")

    with pytest.raises(TypeError):
        HalfCipher()


def test_register_custom_adapter():
    class IdentityCipher(CipherAdapter):
        def encrypt(self, data, key):
            return bytes(data)

        def decrypt(self, data, key):
            return bytes(data)

        @classmethod
        def info(cls):
            return CipherInfo(name="identity", description="no-op")

    try:
        CipherRegistry.register(IdentityCipher)
        assert create_cipher("identity").encrypt(b"x", b"k") == b"x"
    finally:
        CipherRegistry._ciphers.pop("identity", None)


def test_adapter_logs_sizes_not_key(caplog, key):
    cipher = create_cipher("xxtea")
    with caplog.at_level(logging.DEBUG, logger="teacrypt.adapters.xxtea"):
        cipher.encrypt(b"Hello, XXTEA!", key)
    assert "xxtea encrypt: 13 -> 20 bytes" in caplog.text
    assert key.decode() not in caplog.text


def test_adapter_logs_and_reraises_empty_key(caplog):
    cipher = create_cipher("xxtea")
    with caplog.at_level(logging.WARNING, logger="teacrypt.adapters.xxtea"):
        with pytest.raises(EmptyKeyError):
            cipher.encrypt(b"payload", b"")
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.error_code == "empty_key"
    assert record.cipher == "xxtea"


def test_adapter_logs_and_reraises_malformed_length(caplog, key):
    cipher = create_cipher("xxtea")
    with caplog.at_level(logging.WARNING, logger="teacrypt.adapters.xxtea"):
        with pytest.raises(MalformedLengthError):
            cipher.decrypt(bytes.fromhex("701b812c5cdb6caa"), key)
    assert caplog.records[-1].error_code == "malformed_length"
