"""The AES block cipher (128-, 192- and 256-bit keys)."""

from typing import List, Sequence, Tuple

KEY_SIZE_128 = 16
KEY_SIZE_192 = 24
KEY_SIZE_256 = 32
BLOCK_SIZE = 16

_ROUNDS = {KEY_SIZE_128: 10, KEY_SIZE_192: 12, KEY_SIZE_256: 14}

_RCON: Tuple[int, ...] = (
    0x01000000, 0x02000000, 0x04000000, 0x08000000,
    0x10000000, 0x20000000, 0x40000000, 0x80000000,
    0x1B000000, 0x36000000,
)


class AESError(ValueError):
    """Raised for an AES key or block of invalid length."""


def _gf_mul(a: int, b: int) -> int:
    """Multiply two elements of GF(2^8) modulo x^8 + x^4 + x^3 + x + 1."""
    product = 0
    for _ in range(8):
        if b & 1:
            product ^= a
        high_bit = a & 0x80
        a = (a << 1) & 0xFF
        if high_bit:
            a ^= 0x1B
        b >>= 1
    return product


def _gf_inverse(a: int) -> int:
    if a == 0:
        return 0
    result, base, exponent = 1, a, 254
    while exponent:
        if exponent & 1:
            result = _gf_mul(result, base)
        base = _gf_mul(base, base)
        exponent >>= 1
    return result


def _rotl8(x: int, n: int) -> int:
    return ((x << n) | (x >> (8 - n))) & 0xFF


def _sbox_entry(x: int) -> int:
    b = _gf_inverse(x)
    return b ^ _rotl8(b, 1) ^ _rotl8(b, 2) ^ _rotl8(b, 3) ^ _rotl8(b, 4) ^ 0x63


_SBOX: Tuple[int, ...] = tuple(_sbox_entry(x) for x in range(256))


def _invert(table: Sequence[int]) -> Tuple[int, ...]:
    inverse = [0] * 256
    for index, value in enumerate(table):
        inverse[value] = index
    return tuple(inverse)


_INV_SBOX = _invert(_SBOX)


def _mul_table(n: int) -> Tuple[int, ...]:
    return tuple(_gf_mul(x, n) for x in range(256))


_MUL2 = _mul_table(2)
_MUL3 = _mul_table(3)
_MUL9 = _mul_table(9)
_MUL11 = _mul_table(11)
_MUL13 = _mul_table(13)
_MUL14 = _mul_table(14)

# The state is stored column by column: byte (row r, column c) is at 4*c + r.
# Entry i names the source position of output byte i after ShiftRows.
_SHIFT: Tuple[int, ...] = (0, 5, 10, 15, 4, 9, 14, 3, 8, 13, 2, 7, 12, 1, 6, 11)
_INV_SHIFT = _invert(_SHIFT + tuple(range(16, 256)))[:16]


def _sub_word(w: int) -> int:
    return (
        _SBOX[(w >> 24) & 0xFF] << 24
        | _SBOX[(w >> 16) & 0xFF] << 16
        | _SBOX[(w >> 8) & 0xFF] << 8
        | _SBOX[w & 0xFF]
    )


def _rot_word(w: int) -> int:
    return ((w << 8) | (w >> 24)) & 0xFFFFFFFF


def _expand_key(key: bytes, rounds: int) -> List[bytes]:
    nk = len(key) // 4
    words = [int.from_bytes(key[4 * i:4 * i + 4], "big") for i in range(nk)]
    for i in range(nk, 4 * (rounds + 1)):
        temp = words[i - 1]
        if i % nk == 0:
            temp = _sub_word(_rot_word(temp)) ^ _RCON[i // nk - 1]
        elif nk > 6 and i % nk == 4:
            temp = _sub_word(temp)
        words.append(words[i - nk] ^ temp)
    return [
        b"".join(w.to_bytes(4, "big") for w in words[4 * r:4 * r + 4])
        for r in range(rounds + 1)
    ]


def _add_round_key(state: bytearray, round_key: bytes) -> bytearray:
    return bytearray(s ^ k for s, k in zip(state, round_key))


def _mix_columns(state: bytearray) -> bytearray:
    out = bytearray(16)
    for col in range(0, 16, 4):
        a0, a1, a2, a3 = state[col:col + 4]
        out[col] = _MUL2[a0] ^ _MUL3[a1] ^ a2 ^ a3
        out[col + 1] = a0 ^ _MUL2[a1] ^ _MUL3[a2] ^ a3
        out[col + 2] = a0 ^ a1 ^ _MUL2[a2] ^ _MUL3[a3]
        out[col + 3] = _MUL3[a0] ^ a1 ^ a2 ^ _MUL2[a3]
    return out


def _inv_mix_columns(state: bytearray) -> bytearray:
    out = bytearray(16)
    for col in range(0, 16, 4):
        a0, a1, a2, a3 = state[col:col + 4]
        out[col] = _MUL14[a0] ^ _MUL11[a1] ^ _MUL13[a2] ^ _MUL9[a3]
        out[col + 1] = _MUL9[a0] ^ _MUL14[a1] ^ _MUL11[a2] ^ _MUL13[a3]
        out[col + 2] = _MUL13[a0] ^ _MUL9[a1] ^ _MUL14[a2] ^ _MUL11[a3]
        out[col + 3] = _MUL11[a0] ^ _MUL13[a1] ^ _MUL9[a2] ^ _MUL14[a3]
    return out


class AES:
    """AES cipher operating on single 16-byte blocks."""

    block_size = BLOCK_SIZE

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        rounds = _ROUNDS.get(len(key))
        if rounds is None:
            raise AESError("invalid key length, must be 16, 24 or 32 bytes")
        self._rounds = rounds
        self._round_keys = _expand_key(key, rounds)

    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        if len(plaintext) != BLOCK_SIZE:
            raise AESError("plaintext block must be 16 bytes")
        keys = self._round_keys
        state = _add_round_key(bytearray(plaintext), keys[0])
        for round_number in range(1, self._rounds):
            state = bytearray(_SBOX[state[j]] for j in _SHIFT)
            state = _mix_columns(state)
            state = _add_round_key(state, keys[round_number])
        state = bytearray(_SBOX[state[j]] for j in _SHIFT)
        return bytes(_add_round_key(state, keys[self._rounds]))

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        if len(ciphertext) != BLOCK_SIZE:
            raise AESError("ciphertext block must be 16 bytes")
        keys = self._round_keys
        state = _add_round_key(bytearray(ciphertext), keys[self._rounds])
        for round_number in range(self._rounds - 1, 0, -1):
            state = bytearray(_INV_SBOX[state[j]] for j in _INV_SHIFT)
            state = _add_round_key(state, keys[round_number])
            state = _inv_mix_columns(state)
        state = bytearray(_INV_SBOX[state[j]] for j in _INV_SHIFT)
        return bytes(_add_round_key(state, keys[0]))