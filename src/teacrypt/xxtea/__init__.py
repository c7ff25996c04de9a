"""XXTEA (Corrected Block TEA) block cipher.

Based on the algorithm by David J. Wheeler and Roger M. Needham. The whole
message is treated as a single variable-length block of 32-bit words.
"""

from teacrypt.xxtea.cipher import decrypt, encrypt
from teacrypt.xxtea.codec import decode_words, encode_words
from teacrypt.xxtea.engine import DELTA, decrypt_block, encrypt_block, round_count
from teacrypt.xxtea.key_schedule import normalize_key

__all__ = [
    "encrypt", "decrypt",
    "encode_words", "decode_words",
    "normalize_key",
    "DELTA", "round_count", "encrypt_block", "decrypt_block",
]
