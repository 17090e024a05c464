import pytest

from gsc.aes import AES
from gsc.modes import (
    CBC,
    CFB,
    CTR,
    ECB,
    OFB,
    InvalidBlockSizeError,
    InvalidDataSizeError,
    InvalidIVError,
    increment,
    xor_bytes,
)

KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
IV = bytes(range(16))
PLAIN_BLOCK = bytes.fromhex("6bc1bee22e409f96e93d7e117393172a")
MESSAGE = b"Hello, World! This is a test message for AES encryption."


@pytest.fixture
def cipher():
    return AES(KEY)


def test_ecb_known_block(cipher):
    assert ECB(cipher).encrypt(PLAIN_BLOCK) == bytes.fromhex(
        "3ad77bb40d7a3660a89ecaf32466ef97"
    )


def test_cbc_known_block(cipher):
    assert CBC(cipher, IV).encrypt(PLAIN_BLOCK) == bytes.fromhex(
        "7649abac8119b246cee98e9b12e9197d"
    )


def test_ctr_known_block(cipher):
    counter = bytes(range(0xF0, 0x100))
    assert CTR(cipher, counter).encrypt(PLAIN_BLOCK) == bytes.fromhex(
        "874d6191b620e3261bef6864990db6ce"
    )


def test_ecb_encrypts_each_block_independently(cipher):
    data = PLAIN_BLOCK * 2
    out = ECB(cipher).encrypt(data)
    assert out[:16] == out[16:] == cipher.encrypt(PLAIN_BLOCK)


@pytest.mark.parametrize("mode_factory", [
    lambda c: ECB(c),
    lambda c: CBC(c, IV),
])
def test_aligned_modes_round_trip(cipher, mode_factory):
    data = MESSAGE[:48]
    mode = mode_factory(cipher)
    encrypted = mode.encrypt(data)
    assert len(encrypted) == len(data)
    assert mode.decrypt(encrypted) == data


@pytest.mark.parametrize("mode_factory", [
    lambda c: ECB(c),
    lambda c: CBC(c, IV),
])
def test_aligned_modes_reject_unaligned_data(cipher, mode_factory):
    mode = mode_factory(cipher)
    with pytest.raises(InvalidDataSizeError):
        mode.encrypt(b"short")
    with pytest.raises(InvalidDataSizeError):
        mode.decrypt(bytes(17))


@pytest.mark.parametrize("mode_factory", [
    lambda c: CFB(c, IV),
    lambda c: OFB(c, IV),
    lambda c: CTR(c, IV),
    lambda c: CFB(c, IV).with_segment_size(1),
    lambda c: CFB(c, IV).with_segment_size(5),
])
@pytest.mark.parametrize("length", [0, 1, 15, 16, 17, len(MESSAGE)])
def test_stream_modes_round_trip(cipher, mode_factory, length):
    data = MESSAGE[:length]
    mode = mode_factory(cipher)
    encrypted = mode.encrypt(data)
    assert len(encrypted) == length
    assert mode.decrypt(encrypted) == data


def test_first_block_of_cfb_and_ofb_is_plaintext_xor_encrypted_iv(cipher):
    expected = xor_bytes(PLAIN_BLOCK, cipher.encrypt(IV))
    assert CFB(cipher, IV).encrypt(PLAIN_BLOCK) == expected
    assert OFB(cipher, IV).encrypt(PLAIN_BLOCK) == expected


def test_cbc_chains_blocks(cipher):
    data = PLAIN_BLOCK * 2
    out = CBC(cipher, IV).encrypt(data)
    assert out[:16] != out[16:]
    assert out[16:] == cipher.encrypt(xor_bytes(PLAIN_BLOCK, out[:16]))


def test_modes_do_not_keep_state_between_calls(cipher):
    for mode in (CBC(cipher, IV), CFB(cipher, IV), OFB(cipher, IV), CTR(cipher, IV)):
        first = mode.encrypt(PLAIN_BLOCK * 3)
        assert mode.encrypt(PLAIN_BLOCK * 3) == first


def test_iv_is_copied(cipher):
    iv = bytearray(IV)
    mode = CBC(cipher, iv)
    before = mode.encrypt(PLAIN_BLOCK)
    iv[0] ^= 0xFF
    assert mode.encrypt(PLAIN_BLOCK) == before


@pytest.mark.parametrize("mode_class", [CBC, CFB, OFB, CTR])
def test_wrong_iv_length_is_rejected(cipher, mode_class):
    with pytest.raises(InvalidIVError):
        mode_class(cipher, bytes(8))


@pytest.mark.parametrize("segment", [0, -1, 17])
def test_invalid_segment_size(cipher, segment):
    with pytest.raises(InvalidBlockSizeError):
        CFB(cipher, IV).with_segment_size(segment)


def test_with_segment_size_returns_same_mode(cipher):
    mode = CFB(cipher, IV)
    assert mode.with_segment_size(8) is mode
    assert mode.segment_size == 8


def test_block_size_follows_cipher(cipher):
    for mode in (ECB(cipher), CBC(cipher, IV), CFB(cipher, IV), OFB(cipher, IV), CTR(cipher, IV)):
        assert mode.block_size == cipher.block_size


def test_xor_bytes_is_self_inverse_and_truncates():
    a = b"abcdef"
    b = b"\x01\x02\x03"
    assert len(xor_bytes(a, b)) == len(b)
    assert xor_bytes(xor_bytes(a, b), b) == a[:len(b)]


@pytest.mark.parametrize("counter", [bytes(4), b"\x00\x00\x00\xff", b"\x12\xff\xff\xff", IV])
def test_increment_adds_one(counter):
    width = len(counter)
    result = increment(counter)
    assert len(result) == width
    assert int.from_bytes(result, "big") == int.from_bytes(counter, "big") + 1


def test_increment_wraps_to_zero():
    assert increment(b"\xff" * 16) == bytes(16)