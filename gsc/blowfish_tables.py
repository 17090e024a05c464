"""Initial P-array and S-boxes for the Blowfish block cipher.

The values are the hexadecimal digits of the fractional part of pi, taken
32 bits at a time: the first 18 words form the P-array and the next 1024
words fill the four S-boxes in order.
"""

from typing import Tuple

_P_WORDS = 18
_S_WORDS = 256
_TOTAL_WORDS = _P_WORDS + 4 * _S_WORDS
_BITS = 32 * _TOTAL_WORDS
_GUARD_BITS = 64
_MASK32 = 0xFFFFFFFF


def _arctan_inverse(x: int, one: int) -> int:
    """Return arctan(1/x) as a fixed-point integer scaled by ``one``."""
    term = one // x
    total = term
    x_squared = x * x
    divisor = 1
    sign = -1
    while term:
        term //= x_squared
        divisor += 2
        total += sign * (term // divisor)
        sign = -sign
    return total


def _pi_fraction_words() -> Tuple[int, ...]:
    one = 1 << (_BITS + _GUARD_BITS)
    pi_fixed = 16 * _arctan_inverse(5, one) - 4 * _arctan_inverse(239, one)
    fraction = (pi_fixed >> _GUARD_BITS) - (3 << _BITS)
    return tuple(
        (fraction >> (_BITS - 32 * (index + 1))) & _MASK32
        for index in range(_TOTAL_WORDS)
    )


_WORDS = _pi_fraction_words()

PBOX: Tuple[int, ...] = _WORDS[:_P_WORDS]
SBOX0: Tuple[int, ...] = _WORDS[_P_WORDS:_P_WORDS + _S_WORDS]
SBOX1: Tuple[int, ...] = _WORDS[_P_WORDS + _S_WORDS:_P_WORDS + 2 * _S_WORDS]
SBOX2: Tuple[int, ...] = _WORDS[_P_WORDS + 2 * _S_WORDS:_P_WORDS + 3 * _S_WORDS]
SBOX3: Tuple[int, ...] = _WORDS[_P_WORDS + 3 * _S_WORDS:_P_WORDS + 4 * _S_WORDS]

del _WORDS