"""Block cipher modes of operation: ECB, CBC, CFB, OFB and CTR."""

from typing import Iterator, Protocol


class ModeError(ValueError):
    """Base class for errors raised by the cipher modes."""


class InvalidBlockSizeError(ModeError):
    """Raised for an invalid block or segment size."""


class InvalidDataSizeError(ModeError):
    """Raised when the data length is not a multiple of the block size."""


class InvalidIVError(ModeError):
    """Raised for an initialisation vector or counter of the wrong length."""


class InvalidNonceError(ModeError):
    """Raised for a nonce of the wrong length."""


class TagMismatchError(ModeError):
    """Raised when an authentication tag does not match."""


class BlockCipher(Protocol):
    """A cipher that encrypts and decrypts single fixed-size blocks."""

    block_size: int

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt one block."""
        ...

    def decrypt(self, block: bytes) -> bytes:
        """Decrypt one block."""
        ...


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two byte strings; the result has the length of the shorter one."""
    return bytes(x ^ y for x, y in zip(a, b))


def increment(counter: bytes) -> bytes:
    """Return the big-endian counter plus one, wrapping around to zero."""
    width = len(counter)
    if width == 0:
        return b""
    value = (int.from_bytes(counter, "big") + 1) % (1 << (8 * width))
    return value.to_bytes(width, "big")


def _aligned_blocks(data: bytes, block_size: int) -> Iterator[bytes]:
    if len(data) % block_size:
        raise InvalidDataSizeError(
            "data length must be a multiple of the block size"
        )
    for start in range(0, len(data), block_size):
        yield data[start:start + block_size]


def _checked_iv(cipher: BlockCipher, iv: bytes) -> bytes:
    iv = bytes(iv)
    if len(iv) != cipher.block_size:
        raise InvalidIVError("invalid initialisation vector")
    return iv


class ECB:
    """Electronic codebook mode. Each block is enciphered independently,
    which leaks patterns; not suited to protecting real data."""

    def __init__(self, cipher: BlockCipher) -> None:
        self._cipher = cipher

    @property
    def block_size(self) -> int:
        return self._cipher.block_size

    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt data whose length is a multiple of the block size."""
        return b"".join(
            self._cipher.encrypt(block)
            for block in _aligned_blocks(bytes(plaintext), self.block_size)
        )

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt data whose length is a multiple of the block size."""
        return b"".join(
            self._cipher.decrypt(block)
            for block in _aligned_blocks(bytes(ciphertext), self.block_size)
        )


class CBC:
    """Cipher block chaining mode; input must be block aligned."""

    def __init__(self, cipher: BlockCipher, iv: bytes) -> None:
        self._cipher = cipher
        self._iv = _checked_iv(cipher, iv)

    @property
    def block_size(self) -> int:
        return self._cipher.block_size

    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt data whose length is a multiple of the block size."""
        previous = self._iv
        out = bytearray()
        for block in _aligned_blocks(bytes(plaintext), self.block_size):
            previous = self._cipher.encrypt(xor_bytes(block, previous))
            out += previous
        return bytes(out)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt data whose length is a multiple of the block size."""
        previous = self._iv
        out = bytearray()
        for block in _aligned_blocks(bytes(ciphertext), self.block_size):
            out += xor_bytes(self._cipher.decrypt(block), previous)
            previous = block
        return bytes(out)


class CFB:
    """Cipher feedback mode; handles data of any length."""

    def __init__(self, cipher: BlockCipher, iv: bytes) -> None:
        self._cipher = cipher
        self._iv = _checked_iv(cipher, iv)
        self.segment_size = cipher.block_size

    @property
    def block_size(self) -> int:
        return self._cipher.block_size

    def with_segment_size(self, segment_size: int) -> "CFB":
        """Set the feedback segment size in bytes and return this mode."""
        if segment_size <= 0 or segment_size > self._cipher.block_size:
            raise InvalidBlockSizeError("invalid segment size")
        self.segment_size = segment_size
        return self

    def _process(self, data: bytes, encrypting: bool) -> bytes:
        block_size = self._cipher.block_size
        segment = self.segment_size
        register = self._iv
        out = bytearray()
        for start in range(0, len(data), segment):
            chunk = data[start:start + segment]
            produced = xor_bytes(chunk, self._cipher.encrypt(register))
            out += produced
            feedback = produced if encrypting else chunk
            if block_size > segment:
                register = register[segment:] + feedback
            else:
                register = feedback + register[len(feedback):]
        return bytes(out)

    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt data of any length."""
        return self._process(bytes(plaintext), True)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt data of any length."""
        return self._process(bytes(ciphertext), False)


class OFB:
    """Output feedback mode; encryption and decryption are the same."""

    def __init__(self, cipher: BlockCipher, iv: bytes) -> None:
        self._cipher = cipher
        self._iv = _checked_iv(cipher, iv)

    @property
    def block_size(self) -> int:
        return self._cipher.block_size

    def encrypt(self, plaintext: bytes) -> bytes:
        """XOR data of any length with the OFB keystream."""
        data = bytes(plaintext)
        block_size = self._cipher.block_size
        register = self._iv
        out = bytearray()
        for start in range(0, len(data), block_size):
            register = self._cipher.encrypt(register)
            out += xor_bytes(data[start:start + block_size], register)
        return bytes(out)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """XOR data of any length with the OFB keystream."""
        return self.encrypt(ciphertext)


class CTR:
    """Counter mode; encryption and decryption are the same."""

    def __init__(self, cipher: BlockCipher, initial_counter: bytes) -> None:
        self._cipher = cipher
        self._counter = _checked_iv(cipher, initial_counter)

    @property
    def block_size(self) -> int:
        return self._cipher.block_size

    def encrypt(self, plaintext: bytes) -> bytes:
        """XOR data of any length with the counter keystream."""
        data = bytes(plaintext)
        block_size = self._cipher.block_size
        counter = self._counter
        out = bytearray()
        for start in range(0, len(data), block_size):
            keystream = self._cipher.encrypt(counter)
            out += xor_bytes(data[start:start + block_size], keystream)
            counter = increment(counter)
        return bytes(out)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """XOR data of any length with the counter keystream."""
        return self.encrypt(ciphertext)