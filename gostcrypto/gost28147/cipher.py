"""GOST 28147-89 block cipher (RFC 5830)."""

from __future__ import annotations

from collections.abc import Iterable

from gostcrypto.gost28147.sbox import SBOX_DEFAULT, Sbox

__all__ = [
    "BLOCK_SIZE",
    "KEY_SIZE",
    "SEQ_ENCRYPT",
    "SEQ_DECRYPT",
    "Cipher",
    "block_to_halves",
    "halves_to_block",
]

BLOCK_SIZE = 8
KEY_SIZE = 32

_MASK32 = 0xFFFFFFFF

SEQ_ENCRYPT: tuple[int, ...] = (
    0, 1, 2, 3, 4, 5, 6, 7,
    0, 1, 2, 3, 4, 5, 6, 7,
    0, 1, 2, 3, 4, 5, 6, 7,
    7, 6, 5, 4, 3, 2, 1, 0,
)
SEQ_DECRYPT: tuple[int, ...] = (
    0, 1, 2, 3, 4, 5, 6, 7,
    7, 6, 5, 4, 3, 2, 1, 0,
    7, 6, 5, 4, 3, 2, 1, 0,
    7, 6, 5, 4, 3, 2, 1, 0,
)


def block_to_halves(block: bytes) -> tuple[int, int]:
    """Split an 8-byte block into two little-endian 32-bit halves."""
    if len(block) < BLOCK_SIZE:
        raise ValueError(f"block must be at least {BLOCK_SIZE} bytes")
    return (
        int.from_bytes(block[0:4], "little"),
        int.from_bytes(block[4:8], "little"),
    )


def halves_to_block(n1: int, n2: int) -> bytes:
    """Join two 32-bit halves into a block, ``n2`` first."""
    return (n2 & _MASK32).to_bytes(4, "little") + (n1 & _MASK32).to_bytes(4, "little")


class Cipher:
    """GOST 28147-89 cipher keyed with a 32-byte key and an sbox."""

    block_size = BLOCK_SIZE

    def __init__(self, key: bytes, sbox: Sbox = SBOX_DEFAULT) -> None:
        key = bytes(key)
        if len(key) != KEY_SIZE:
            raise ValueError("invalid key size")
        self.key = key
        self.sbox = sbox
        self._x = tuple(
            int.from_bytes(key[i : i + 4], "little") for i in range(0, KEY_SIZE, 4)
        )

    def xcrypt(self, seq: Iterable[int], n1: int, n2: int) -> tuple[int, int]:
        """Run the Feistel rounds given by ``seq`` over the halves."""
        substitute = self.sbox.substitute
        x = self._x
        for i in seq:
            t = substitute((n1 + x[i]) & _MASK32)
            t = ((t << 11) | (t >> 21)) & _MASK32
            n1, n2 = t ^ n2, n1
        return n1, n2

    def _crypt(self, seq: tuple[int, ...], block: bytes) -> bytes:
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"block must be {BLOCK_SIZE} bytes")
        n1, n2 = self.xcrypt(seq, *block_to_halves(block))
        return halves_to_block(n1, n2)

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt a single 8-byte block."""
        return self._crypt(SEQ_ENCRYPT, block)

    def decrypt(self, block: bytes) -> bytes:
        """Decrypt a single 8-byte block."""
        return self._crypt(SEQ_DECRYPT, block)