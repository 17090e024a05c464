import pytest

from gsc.sm3 import SM3, sm3

GOLDEN = [
    ("", "1ab21d8355cfa17f8e61194831e81a8f22bec8c728fefb747ed035eb5082aa2b"),
    ("abc", "66c7f0f462eeedd9d1f2d46bdc10e4e24167c4875cf2f7a2297da02b8f4ba8e0"),
    (
        "abcdabcdabcdabcdabcdabcdabcdabcdabcdabcdabcdabcdabcdabcdabcdabcd",
        "debe9ff92275b8a138604889c18e5a4d6fdb70e5387e5765293dcba39c0c5732",
    ),
]


@pytest.mark.parametrize("text, expected", GOLDEN)
def test_sum(text, expected):
    assert sm3(text.encode()).hex() == expected


@pytest.mark.parametrize("text, expected", GOLDEN)
def test_new_update_digest(text, expected):
    h = SM3()
    h.update(text.encode())
    assert h.hexdigest() == expected


def test_block_writes():
    long_text = b"abcdefgh" * 100
    whole = SM3()
    whole.update(long_text)
    chunked = SM3()
    for start in range(0, len(long_text), 40):
        chunked.update(long_text[start:start + 40])
    assert whole.digest() == chunked.digest()


def test_reset():
    h = SM3()
    h.update(b"abc")
    first = h.digest()
    h.reset()
    h.update(b"abc")
    assert h.digest() == first
    assert first.hex() == GOLDEN[1][1]


def test_digest_does_not_change_state():
    h = SM3()
    h.update(b"abcd")
    first = h.digest()
    assert h.digest() == first
    h.update(b"efgh")
    assert h.digest() == sm3(b"abcdefgh")


def test_copy_is_independent():
    h = SM3()
    h.update(b"ab")
    clone = h.copy()
    clone.update(b"c")
    assert clone.hexdigest() == GOLDEN[1][1]
    assert h.digest() == sm3(b"ab")


@pytest.mark.parametrize("length", [55, 56, 63, 64, 65, 119, 128])
def test_padding_boundaries_chunked_equals_whole(length):
    data = bytes(i % 256 for i in range(length))
    h = SM3()
    for byte in data:
        h.update(bytes([byte]))
    assert h.digest() == sm3(data)
    assert len(h.digest()) == 32


def test_constructor_data():
    assert SM3(b"abc").hexdigest() == GOLDEN[1][1]