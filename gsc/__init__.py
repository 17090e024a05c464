"""Pure-Python AES, SM4, RC5 and RC4 ciphers, padding schemes, cipher modes and the SM3 hash."""

__version__ = "0.1.0"

__all__ = [
    "aes",
    "blowfish_tables",
    "modes",
    "padding",
    "rc4",
    "rc5",
    "sm3",
    "sm4",
    "sm4_tables",
]