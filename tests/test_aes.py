import pytest

from gsc.aes import AES, AESError

PLAINTEXT = bytes.fromhex("00112233445566778899aabbccddeeff")


@pytest.mark.parametrize(
    "key_len, expected",
    [
        (16, "69c4e0d86a7b0430d8cdb78070b4c55a"),
        (24, "dda97ca4864cdfe06eaf70a0ec0d7191"),
        (32, "8ea2b7ca516745bfeafc49904b496089"),
    ],
)
def test_fips197_vectors(key_len, expected):
    cipher = AES(bytes(range(key_len)))
    ciphertext = cipher.encrypt(PLAINTEXT)
    assert ciphertext.hex() == expected
    assert cipher.decrypt(ciphertext) == PLAINTEXT


@pytest.mark.parametrize("key", [b"k" * 16, b"k" * 24, b"12345678901234567890123456789012"])
def test_round_trip(key):
    cipher = AES(key)
    block = b"Hello, World!!!!"
    encrypted = cipher.encrypt(block)
    assert encrypted != block
    assert len(encrypted) == 16
    assert cipher.decrypt(encrypted) == block


def test_different_keys_give_different_ciphertexts():
    block = bytes(16)
    assert AES(bytes(16)).encrypt(block) != AES(b"\x01" + bytes(15)).encrypt(block)


def test_block_size():
    assert AES(bytes(16)).block_size == 16


@pytest.mark.parametrize("length", [0, 8, 15, 17, 31, 33])
def test_invalid_key_length(length):
    with pytest.raises(AESError):
        AES(bytes(length))


@pytest.mark.parametrize("length", [0, 15, 17, 32])
def test_invalid_block_length(length):
    cipher = AES(bytes(16))
    with pytest.raises(AESError):
        cipher.encrypt(bytes(length))
    with pytest.raises(AESError):
        cipher.decrypt(bytes(length))


def test_input_is_not_modified():
    block = bytearray(PLAINTEXT)
    AES(bytes(16)).encrypt(block)
    assert bytes(block) == PLAINTEXT