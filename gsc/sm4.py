"""The SM4 block cipher."""

import struct
from typing import List, Sequence

from .sm4_tables import CK, FK, SBOX, SBOX0, SBOX1, SBOX2, SBOX3

BLOCK_SIZE = 16
KEY_SIZE = 16

_MASK32 = 0xFFFFFFFF


class SM4Error(ValueError):
    """Raised for an SM4 key or block of invalid length."""


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _tau(x: int) -> int:
    return int.from_bytes(bytes(SBOX[b] for b in x.to_bytes(4, "big")), "big")


def _key_transform(x: int) -> int:
    b = _tau(x)
    return b ^ _rotl(b, 13) ^ _rotl(b, 23)


def _round_transform(x: int) -> int:
    return (
        SBOX3[x >> 24]
        ^ SBOX2[(x >> 16) & 0xFF]
        ^ SBOX1[(x >> 8) & 0xFF]
        ^ SBOX0[x & 0xFF]
    )


def _expand_key(key: bytes) -> List[int]:
    k = [m ^ f for m, f in zip(struct.unpack(">4I", key), FK)]
    for i, ck in enumerate(CK):
        k.append(k[i] ^ _key_transform(k[i + 1] ^ k[i + 2] ^ k[i + 3] ^ ck))
    return k[4:]


class SM4:
    """SM4 cipher operating on single 16-byte blocks."""

    block_size = BLOCK_SIZE

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) != KEY_SIZE:
            raise SM4Error("sm4: key must be 16 bytes (128 bits)")
        self._round_keys = _expand_key(key)

    @staticmethod
    def _crypt(block: bytes, keys: Sequence[int]) -> bytes:
        block = bytes(block)
        if len(block) != BLOCK_SIZE:
            raise SM4Error("sm4: block must be 16 bytes (128 bits)")
        x0, x1, x2, x3 = struct.unpack(">4I", block)
        for rk in keys:
            x0, x1, x2, x3 = x1, x2, x3, x0 ^ _round_transform(x1 ^ x2 ^ x3 ^ rk)
        return struct.pack(">4I", x3, x2, x1, x0)

    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        return self._crypt(plaintext, self._round_keys)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        return self._crypt(ciphertext, self._round_keys[::-1])