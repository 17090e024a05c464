"""Block padding schemes and their removal."""

import os


class PaddingError(ValueError):
    """Raised when padding cannot be removed."""


def _pad_length(data: bytes, block_size: int) -> int:
    return block_size - len(data) % block_size


def pkcs7_pad(data: bytes, block_size: int) -> bytes:
    """Append N bytes of value N (PKCS#7)."""
    n = _pad_length(data, block_size)
    return bytes(data) + bytes([n & 0xFF]) * n


def m1_pad(data: bytes, block_size: int) -> bytes:
    """Append 0x80 followed by zeros, always adding at least one byte."""
    n = _pad_length(data, block_size)
    return bytes(data) + b"\x80" + bytes(n - 1)


def m1_plus_zero_pad(data: bytes, block_size: int) -> bytes:
    """Append 0x80, then zeros up to the next block boundary."""
    padded = bytes(data) + b"\x80"
    n = _pad_length(padded, block_size)
    if n == block_size:
        return padded
    return padded + bytes(n)


def m2_pad(data: bytes, block_size: int) -> bytes:
    """Append zeros up to the block boundary; aligned data is left as is."""
    n = _pad_length(data, block_size)
    if n == block_size:
        n = 0
    return bytes(data) + bytes(n)


def iso7816_pad(data: bytes, block_size: int) -> bytes:
    """Append 0x80 followed by zeros (ISO/IEC 7816-4)."""
    n = _pad_length(data, block_size)
    return bytes(data) + b"\x80" + bytes(n - 1)


def ansix923_pad(data: bytes, block_size: int) -> bytes:
    """Append zeros ending in a byte holding the pad length (ANSI X.923)."""
    n = _pad_length(data, block_size)
    return bytes(data) + bytes(n - 1) + bytes([n & 0xFF])


def no_pad(data: bytes, block_size: int) -> bytes:
    """Return the data unchanged."""
    return bytes(data)


def zero_pad(data: bytes, block_size: int) -> bytes:
    """Append zeros, adding a whole block when the data is aligned."""
    return bytes(data) + bytes(_pad_length(data, block_size))


def pkcs5_pad(data: bytes) -> bytes:
    """PKCS#7 padding with an 8-byte block."""
    return pkcs7_pad(data, 8)


def iso10126_pad(data: bytes, block_size: int) -> bytes:
    """Append random bytes ending in a byte holding the pad length."""
    n = _pad_length(data, block_size)
    return bytes(data) + os.urandom(n - 1) + bytes([n & 0xFF])


def tbc_pad(data: bytes, block_size: int) -> bytes:
    """Append copies of the bitwise complement of the last data byte."""
    last = data[-1] if data else 0
    n = _pad_length(data, block_size)
    return bytes(data) + bytes([~last & 0xFF]) * n


def _require_data(data: bytes) -> bytes:
    data = bytes(data)
    if not data:
        raise PaddingError("empty data")
    return data


def pkcs7_unpad(data: bytes) -> bytes:
    """Strip as many bytes as the last byte says."""
    data = _require_data(data)
    n = data[-1]
    if n > len(data):
        raise PaddingError("invalid padding size")
    return data[:len(data) - n]


def pkcs5_unpad(data: bytes) -> bytes:
    """Remove PKCS#5 padding."""
    return pkcs7_unpad(data)


def _strip_marker(data: bytes, scheme: str) -> bytes:
    data = _require_data(data)
    for index in range(len(data) - 1, -1, -1):
        if data[index] == 0x80:
            return data[:index]
        if data[index] != 0x00:
            raise PaddingError(f"invalid {scheme} padding")
    raise PaddingError("padding byte 0x80 not found")


def iso7816_unpad(data: bytes) -> bytes:
    """Strip trailing zeros and the 0x80 marker before them."""
    return _strip_marker(data, "ISO7816")


def ansix923_unpad(data: bytes) -> bytes:
    """Strip ANSI X.923 padding, checking the filler bytes are zero."""
    data = _require_data(data)
    n = data[-1]
    if n > len(data):
        raise PaddingError("invalid padding size")
    if any(data[len(data) - n:len(data) - 1]):
        raise PaddingError("invalid ANSI X.923 padding")
    return data[:len(data) - n]


def zero_unpad(data: bytes) -> bytes:
    """Strip trailing zero bytes."""
    data = _require_data(data)
    stripped = data.rstrip(b"\x00")
    if not stripped:
        raise PaddingError("all zero data")
    return stripped


def m1_unpad(data: bytes) -> bytes:
    """Strip trailing zeros and the 0x80 marker before them."""
    return _strip_marker(data, "M1")


def m2_unpad(data: bytes) -> bytes:
    """Strip trailing zero bytes."""
    return zero_unpad(data)


def tbc_unpad(data: bytes) -> bytes:
    """Return the data up to the last byte that differs from the complement
    of the final byte."""
    data = _require_data(data)
    complement = ~data[-1] & 0xFF
    for index in range(len(data) - 1, -1, -1):
        if data[index] != complement:
            return data[:index + 1]
    raise PaddingError("invalid TBC padding")