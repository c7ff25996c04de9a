"""Shared test fixtures."""

import os

import pytest

from teacrypt.config import get_settings
from teacrypt.utils.crypto import CryptoRandom

KEY = b"0123456789abcdef"


@pytest.fixture
def rng():
    """Provide a seeded CryptoRandom for deterministic tests."""
    return CryptoRandom(seed=42)


@pytest.fixture
def key():
    return KEY


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Keep TEACRYPT_* variables and any local .env file out of the tests."""
    for name in list(os.environ):
        if name.startswith("TEACRYPT_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
