"""XXTEA adapter for the cipher registry."""

from __future__ import annotations

import logging

from teacrypt import xxtea
from teacrypt.adapters import CipherRegistry
from teacrypt.adapters.base import CipherAdapter, CipherInfo
from teacrypt.errors import CryptError

logger = logging.getLogger(__name__)


@CipherRegistry.register
class XxteaAdapter(CipherAdapter):

    @classmethod
    def info(cls) -> CipherInfo:
        return CipherInfo(
            name="xxtea",
            description="XXTEA (Corrected Block TEA), whole message as one block",
            block_aligned=True,
        )

    def encrypt(self, data: bytes, key: bytes | str) -> bytes:
        try:
            out = xxtea.encrypt(data, key)
        except CryptError as e:
            logger.warning(
                "xxtea encrypt failed: %s", e.message,
                extra={"error_code": e.code, "cipher": "xxtea"},
            )
            raise
        logger.debug("xxtea encrypt: %d -> %d bytes", len(data), len(out))
        return out

    def decrypt(self, data: bytes, key: bytes | str) -> bytes:
        try:
            out = xxtea.decrypt(data, key)
        except CryptError as e:
            logger.warning(
                "xxtea decrypt failed: %s", e.message,
                extra={"error_code": e.code, "cipher": "xxtea"},
            )
            raise
        logger.debug("xxtea decrypt: %d -> %d bytes", len(data), len(out))
        return out
