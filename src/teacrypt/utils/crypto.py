"""Random source for sample plaintexts and keys."""

import random
import secrets


class CryptoRandom:
    """Random byte and integer source.

    Uses `secrets` when unseeded, `random.Random(seed)` for reproducible
    test data.
    """

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed) if seed is not None else None

    def get_uint32(self) -> int:
        if self._rng is not None:
            return self._rng.getrandbits(32)
        return secrets.randbits(32)

    def get_range(self, max_val: int) -> int:
        """Return a random integer in [0, max_val)."""
        if max_val <= 0:
            return 0
        if self._rng is not None:
            return self._rng.randrange(max_val)
        return secrets.randbelow(max_val)

    def get_bytes(self, length: int) -> bytes:
        if length <= 0:
            return b""
        if self._rng is not None:
            return self._rng.randbytes(length)
        return secrets.token_bytes(length)

    def get_words(self, count: int) -> list[int]:
        """Return ``count`` random 32-bit words."""
        return [self.get_uint32() for _ in range(count)]
