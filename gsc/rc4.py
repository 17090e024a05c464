"""The RC4 stream cipher."""

MIN_KEY_SIZE = 1
MAX_KEY_SIZE = 256
STATE_SIZE = 256


class RC4Error(ValueError):
    """Raised for an RC4 key of invalid length."""


class RC4:
    """RC4 keystream generator.

    The keystream position advances with every call, so encrypting twice
    with the same instance continues the stream rather than restarting it.
    """

    def __init__(self, key: bytes) -> None:
        self._state = bytearray(STATE_SIZE)
        self._i = 0
        self._j = 0
        self.reset(key)

    def reset(self, key: bytes) -> None:
        """Re-key the cipher, restarting the keystream."""
        key = bytes(key)
        if not MIN_KEY_SIZE <= len(key) <= MAX_KEY_SIZE:
            raise RC4Error("rc4: key length must be between 1 and 256 bytes")

        state = bytearray(range(STATE_SIZE))
        j = 0
        for i in range(STATE_SIZE):
            j = (j + state[i] + key[i % len(key)]) & 0xFF
            state[i], state[j] = state[j], state[i]

        self._state = state
        self._i = 0
        self._j = 0

    def _crypt(self, data: bytes) -> bytes:
        state = self._state
        i, j = self._i, self._j
        output = bytearray(data)
        for position, value in enumerate(output):
            i = (i + 1) & 0xFF
            j = (j + state[i]) & 0xFF
            state[i], state[j] = state[j], state[i]
            output[position] = value ^ state[(state[i] + state[j]) & 0xFF]
        self._i, self._j = i, j
        return bytes(output)

    def encrypt(self, data: bytes) -> bytes:
        """XOR ``data`` with the next bytes of the keystream."""
        return self._crypt(data)

    def decrypt(self, data: bytes) -> bytes:
        """XOR ``data`` with the next bytes of the keystream."""
        return self._crypt(data)