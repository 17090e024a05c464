# gsc

Block ciphers, a stream cipher, padding schemes, cipher modes and a hash function, all written in pure Python.
The package has no dependencies outside the standard library.

This package is meant for study and experiment. It is slow, and it makes no effort to resist timing attacks. Do not use it to protect real data.

## What is included

| Module                | Contents                                                        |
|-----------------------|-----------------------------------------------------------------|
| `gsc.aes`             | `AES` with 16, 24 or 32-byte keys                               |
| `gsc.sm4`             | `SM4` with 16-byte keys                                         |
| `gsc.sm4_tables`      | the SM4 S-box, `FK` and `CK` constants, and combined round tables |
| `gsc.rc5`             | `RC5`: RC5-32 with 1 to 255 rounds (12 by default) and keys of 1 to 255 bytes |
| `gsc.rc4`             | `RC4` stream cipher with keys of 1 to 256 bytes                 |
| `gsc.sm3`             | `SM3` hash object and the one-shot `sm3()` function             |
| `gsc.padding`         | padding functions: PKCS#7, PKCS#5, M1, M1(+0), M2, ISO 7816, ANSI X.923, ISO 10126, TBC, zero and none |
| `gsc.modes`           | `ECB`, `CBC`, `CFB`, `OFB` and `CTR` modes, plus `xor_bytes` and `increment` |
| `gsc.blowfish_tables` | the Blowfish initial P-array and S-boxes, computed from the digits of pi |

Every block cipher (`AES`, `SM4`, `RC5`) has the same interface:

- `encrypt(block)` encrypts exactly one block.
- `decrypt(block)` decrypts exactly one block.
- `block_size` gives the block length in bytes.

If the key or the block has the wrong length, the cipher raises an exception:
`AESError`, `SM4Error`, or a subclass of `RC5Error`
(`InvalidKeySizeError`, `InvalidBlockSizeError`, `InvalidRoundsError`, `InvalidWordSizeError`).
All of these derive from `ValueError`.

### Modes

`ECB` and `CBC` need input whose length is a multiple of the block size and raise
`InvalidDataSizeError` otherwise. `CFB`, `OFB` and `CTR` accept data of any length.
`CBC`, `CFB`, `OFB` and `CTR` take an IV or initial counter one block long and raise
`InvalidIVError` if it is not. `CFB.with_segment_size(n)` sets a feedback segment
smaller than the block and raises `InvalidBlockSizeError` for a size outside 1 to the block size.
The mode objects keep no state between calls: each call starts again from the IV or counter.

### Padding

Each `*_pad(data, block_size)` function returns the padded bytes (`pkcs5_pad(data)` always
uses an 8-byte block). The `*_unpad(data)` functions raise `PaddingError` when the padding
cannot be removed. `iso10126_pad` fills with random bytes; its padding is removed with `pkcs7_unpad`.

## Installation

```
pip install .
```

## Examples

### Encrypting a block with SM4

```python
from gsc.sm4 import SM4

key = bytes(range(16))
cipher = SM4(key)
block = b"sixteen byte msg"
ct = cipher.encrypt(block)
assert cipher.decrypt(ct) == block
```

### Using a cipher mode with padding

```python
from gsc.aes import AES
from gsc.modes import CBC, CTR
from gsc.padding import pkcs7_pad, pkcs7_unpad

cipher = AES(bytes(range(16)))
iv = bytes(16)

cbc = CBC(cipher, iv)
ct = cbc.encrypt(pkcs7_pad(b"hello world", cipher.block_size))
assert pkcs7_unpad(cbc.decrypt(ct)) == b"hello world"

ctr = CTR(cipher, iv)
assert ctr.decrypt(ctr.encrypt(b"any length at all")) == b"any length at all"
```

### Hashing with SM3

```python
from gsc.sm3 import SM3, sm3

assert sm3(b"abc").hex() == (
    "66c7f0f462eeedd9d1f2d46bdc10e4e24167c4875cf2f7a2297da02b8f4ba8e0"
)

h = SM3()
h.update(b"ab")
h.update(b"c")
assert h.digest() == sm3(b"abc")
```

`SM3` also has `hexdigest()`, `copy()` and `reset()`. Taking a digest does not change the object,
so more data can be fed in afterwards.

### The RC4 stream cipher

```python
from gsc.rc4 import RC4

ct = RC4(b"secret").encrypt(b"attack at dawn")
assert RC4(b"secret").decrypt(ct) == b"attack at dawn"
```

An `RC4` object keeps its keystream position from one call to the next. To start again from the
beginning of the keystream, call `reset(key)`.

## What the package does not do

- There is no authenticated-encryption mode. The modes in `gsc.modes` provide confidentiality only,
  with no integrity check.
- There are no DES, Blowfish or Twofish ciphers. `gsc.blowfish_tables` holds only the Blowfish
  initial tables.
- There is no command-line tool. The package is a library only.

## Running the tests

```
pip install ".[test]"
pytest
```