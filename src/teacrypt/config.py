"""Environment-driven settings for the command line tool.

All values can be set through ``TEACRYPT_*`` environment variables or a
``.env`` file; CLI flags take precedence.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_log_level(value: str) -> str:
    """Upper-case a logging level name, rejecting names logging does not know."""
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level


class Settings(BaseSettings):
    """teacrypt settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TEACRYPT_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    cipher: str = "xxtea"
    key: SecretStr | None = None
    encoding: Literal["raw", "hex", "base64"] = "raw"

    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        return normalize_log_level(v)

    def key_bytes(self) -> bytes | None:
        if self.key is None:
            return None
        return self.key.get_secret_value().encode("utf-8")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
