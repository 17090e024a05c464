"""The SM3 cryptographic hash function."""

import struct
from typing import List, Tuple

BLOCK_SIZE = 64
SIZE = 32

_MASK32 = 0xFFFFFFFF

IV: Tuple[int, ...] = (
    0x7380166F, 0x4914B2B9, 0x172442D7, 0xDA8A0600,
    0xA96F30BC, 0x163138AA, 0xE38DEE4D, 0xB0FB0E4E,
)

T: Tuple[int, ...] = (0x79CC4519,) * 16 + (0x7A879D8A,) * 48


def _rotl(x: int, n: int) -> int:
    n %= 32
    return ((x << n) | (x >> (32 - n))) & _MASK32


_T_ROTATED: Tuple[int, ...] = tuple(_rotl(t, j) for j, t in enumerate(T))


def _p0(x: int) -> int:
    return x ^ _rotl(x, 9) ^ _rotl(x, 17)


def _p1(x: int) -> int:
    return x ^ _rotl(x, 15) ^ _rotl(x, 23)


def _compress(state: List[int], block: bytes) -> List[int]:
    w = list(struct.unpack(">16I", block))
    for i in range(16, 68):
        w.append(
            _p1(w[i - 16] ^ w[i - 9] ^ _rotl(w[i - 3], 15))
            ^ _rotl(w[i - 13], 7)
            ^ w[i - 6]
        )
    w1 = [w[i] ^ w[i + 4] for i in range(64)]

    a, b, c, d, e, f, g, h = state
    for j in range(64):
        a12 = _rotl(a, 12)
        ss1 = _rotl((a12 + e + _T_ROTATED[j]) & _MASK32, 7)
        ss2 = ss1 ^ a12
        if j < 16:
            ff = a ^ b ^ c
            gg = e ^ f ^ g
        else:
            ff = (a & b) | (a & c) | (b & c)
            gg = (e & f) | (~e & g)
        tt1 = (ff + d + ss2 + w1[j]) & _MASK32
        tt2 = (gg + h + ss1 + w[j]) & _MASK32
        d = c
        c = _rotl(b, 9)
        b = a
        a = tt1
        h = g
        g = _rotl(f, 19)
        f = e
        e = _p0(tt2)

    return [x ^ y for x, y in zip(state, (a, b, c, d, e, f, g, h))]


class SM3:
    """Incremental SM3 hash object with a hashlib-style interface."""

    name = "sm3"
    digest_size = SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self.reset()
        if data:
            self.update(data)

    def reset(self) -> None:
        """Return to the initial state, discarding all data."""
        self._state: List[int] = list(IV)
        self._buffer = bytearray()
        self._length = 0

    def update(self, data: bytes) -> None:
        """Feed more data into the hash."""
        data = bytes(data)
        self._length += len(data)
        self._buffer += data
        full = len(self._buffer) - len(self._buffer) % BLOCK_SIZE
        state = self._state
        for start in range(0, full, BLOCK_SIZE):
            state = _compress(state, bytes(self._buffer[start:start + BLOCK_SIZE]))
        self._state = state
        del self._buffer[:full]

    def copy(self) -> "SM3":
        """Return an independent copy of this hash object."""
        clone = SM3()
        clone._state = list(self._state)
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        """Return the 32-byte digest of the data fed so far."""
        zeros = (55 - self._length) % BLOCK_SIZE
        tail = (
            bytes(self._buffer)
            + b"\x80"
            + bytes(zeros)
            + ((self._length * 8) & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "big")
        )
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack(">8I", *state)

    def hexdigest(self) -> str:
        """Return the digest as a hexadecimal string."""
        return self.digest().hex()


def sm3(data: bytes) -> bytes:
    """Return the SM3 digest of ``data``."""
    return SM3(data).digest()