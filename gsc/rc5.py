"""The RC5 block cipher with 32-bit words (RC5-32/r/b)."""

import struct

BLOCK_SIZE = 8
DEFAULT_ROUNDS = 12
DEFAULT_WORD_SIZE = 32
DEFAULT_KEY_SIZE = 16
MIN_KEY_SIZE = 1
MAX_KEY_SIZE = 255

_MASK32 = 0xFFFFFFFF
_P32 = 0xB7E15163
_Q32 = 0x9E3779B9


class RC5Error(ValueError):
    """Base class for RC5 errors."""


class InvalidKeySizeError(RC5Error):
    """Raised for a key outside 1 to 255 bytes."""


class InvalidBlockSizeError(RC5Error):
    """Raised for a block of the wrong length."""


class InvalidWordSizeError(RC5Error):
    """Raised for an unsupported word size."""


class InvalidRoundsError(RC5Error):
    """Raised for a round count outside 1 to 255."""


def _rotl(x: int, n: int) -> int:
    n &= 31
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _rotr(x: int, n: int) -> int:
    return _rotl(x, -n)


class RC5:
    """RC5 cipher operating on single blocks of two 32-bit words."""

    def __init__(
        self,
        key: bytes,
        rounds: int = DEFAULT_ROUNDS,
        word_size: int = DEFAULT_WORD_SIZE,
    ) -> None:
        key = bytes(key)
        if not MIN_KEY_SIZE <= len(key) <= MAX_KEY_SIZE:
            raise InvalidKeySizeError("rc5: key length must be between 1 and 255 bytes")
        if not 1 <= rounds <= 255:
            raise InvalidRoundsError("rc5: rounds must be between 1 and 255")
        if word_size != 32:
            raise InvalidWordSizeError("rc5: word size must be 32 bits")
        self.rounds = rounds
        self.word_size = word_size
        self.block_size = (word_size // 8) * 2
        self._subkeys = self._expand_key(key, rounds)

    @staticmethod
    def _expand_key(key: bytes, rounds: int) -> list:
        subkeys = [(_P32 + i * _Q32) & _MASK32 for i in range(2 * (rounds + 1))]
        words = [0] * -(-len(key) // 4)
        for index, byte in enumerate(key):
            words[index // 4] |= byte << (8 * (index % 4))

        a = b = i = j = 0
        for _ in range(3 * max(len(subkeys), len(words))):
            a = (subkeys[i] + a + b) & _MASK32
            subkeys[i] = _rotl(a, 3)
            i = (i + 1) % len(subkeys)

            b = (words[j] + a + b) & _MASK32
            words[j] = _rotl(b, (a + b) % 32)
            j = (j + 1) % len(words)
        return subkeys

    def _check(self, block: bytes) -> bytes:
        block = bytes(block)
        if len(block) != self.block_size:
            raise InvalidBlockSizeError("rc5: block size mismatch")
        return block

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt one 8-byte block."""
        a, b = struct.unpack("<2I", self._check(block))
        s = self._subkeys
        a = (a + s[0]) & _MASK32
        b = (b + s[1]) & _MASK32
        for i in range(1, self.rounds + 1):
            a = (_rotl(a ^ b, b % 32) + s[2 * i]) & _MASK32
            b = (_rotl(b ^ a, a % 32) + s[2 * i + 1]) & _MASK32
        return struct.pack("<2I", a, b)

    def decrypt(self, block: bytes) -> bytes:
        """Decrypt one 8-byte block."""
        a, b = struct.unpack("<2I", self._check(block))
        s = self._subkeys
        for i in range(self.rounds, 0, -1):
            b = _rotr((b - s[2 * i + 1]) & _MASK32, a % 32) ^ a
            a = _rotr((a - s[2 * i]) & _MASK32, b % 32) ^ b
        b = (b - s[1]) & _MASK32
        a = (a - s[0]) & _MASK32
        return struct.pack("<2I", a, b)