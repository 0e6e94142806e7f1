"""Modes of operation for GOST 28147-89: ECB, CFB, CTR and MAC."""

from __future__ import annotations

from gostcrypto.gost28147.cipher import (
    BLOCK_SIZE,
    SEQ_ENCRYPT,
    Cipher,
    block_to_halves,
    halves_to_block,
)

__all__ = [
    "SEQ_MAC",
    "CFBEncrypter",
    "CFBDecrypter",
    "CTR",
    "ECBEncrypter",
    "ECBDecrypter",
    "MAC",
]

_MASK32 = 0xFFFFFFFF
_C1 = 0x01010104
_C2 = 0x01010101

SEQ_MAC: tuple[int, ...] = (
    0, 1, 2, 3, 4, 5, 6, 7,
    0, 1, 2, 3, 4, 5, 6, 7,
)


def _check_iv(iv: bytes) -> bytes:
    iv = bytes(iv)
    if len(iv) != BLOCK_SIZE:
        raise ValueError("iv length is not equal to blocksize")
    return iv


def _chunks(data: bytes):
    """Yield consecutive 8-byte chunks, ending with one shorter than a block.

    The final chunk is always yielded, even when empty, because every mode
    here advances its state once more before it stops.
    """
    pos = 0
    while True:
        chunk = data[pos : pos + BLOCK_SIZE]
        yield chunk
        if len(chunk) < BLOCK_SIZE:
            return
        pos += BLOCK_SIZE


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


class CFBEncrypter:
    """Cipher feedback mode encryption stream."""

    def __init__(self, cipher: Cipher, iv: bytes) -> None:
        self.cipher = cipher
        self._iv = _check_iv(iv)

    def xor_key_stream(self, data: bytes) -> bytes:
        """Encrypt ``data`` and return the ciphertext."""
        data = bytes(data)
        out = bytearray()
        for chunk in _chunks(data):
            gamma = self.cipher.encrypt(self._iv)
            produced = _xor(gamma, chunk)
            out += produced
            self._iv = produced + gamma[len(chunk):]
        return bytes(out)


class CFBDecrypter:
    """Cipher feedback mode decryption stream."""

    def __init__(self, cipher: Cipher, iv: bytes) -> None:
        self.cipher = cipher
        self._iv = _check_iv(iv)

    def xor_key_stream(self, data: bytes) -> bytes:
        """Decrypt ``data`` and return the plaintext."""
        data = bytes(data)
        out = bytearray()
        for chunk in _chunks(data):
            gamma = self.cipher.encrypt(self._iv)
            out += _xor(gamma, chunk)
            self._iv = chunk + gamma[len(chunk):]
        return bytes(out)


class CTR:
    """Counter (gamma) mode; encryption and decryption are the same."""

    def __init__(self, cipher: Cipher, iv: bytes) -> None:
        self.cipher = cipher
        n1, n2 = block_to_halves(_check_iv(iv))
        self._n2, self._n1 = cipher.xcrypt(SEQ_ENCRYPT, n1, n2)

    def xor_key_stream(self, data: bytes) -> bytes:
        """XOR ``data`` with the key stream and return the result."""
        data = bytes(data)
        out = bytearray()
        for chunk in _chunks(data):
            self._n1 = (self._n1 + _C2) & _MASK32
            n2 = (self._n2 + _C1) & _MASK32
            if n2 >= _MASK32:
                n2 -= _MASK32
            self._n2 = n2
            gamma = halves_to_block(*self.cipher.xcrypt(SEQ_ENCRYPT, self._n1, self._n2))
            out += _xor(gamma, chunk)
        return bytes(out)


def _check_blocks(data: bytes) -> bytes:
    data = bytes(data)
    if len(data) % BLOCK_SIZE:
        raise ValueError("input is not a whole number of blocks")
    return data


class ECBEncrypter:
    """Electronic codebook mode encryption."""

    block_size = BLOCK_SIZE

    def __init__(self, cipher: Cipher) -> None:
        self.cipher = cipher

    def crypt_blocks(self, data: bytes) -> bytes:
        """Encrypt a whole number of blocks."""
        data = _check_blocks(data)
        return b"".join(
            self.cipher.encrypt(data[i : i + BLOCK_SIZE])
            for i in range(0, len(data), BLOCK_SIZE)
        )


class ECBDecrypter:
    """Electronic codebook mode decryption."""

    block_size = BLOCK_SIZE

    def __init__(self, cipher: Cipher) -> None:
        self.cipher = cipher

    def crypt_blocks(self, data: bytes) -> bytes:
        """Decrypt a whole number of blocks."""
        data = _check_blocks(data)
        return b"".join(
            self.cipher.decrypt(data[i : i + BLOCK_SIZE])
            for i in range(0, len(data), BLOCK_SIZE)
        )


class MAC:
    """GOST 28147-89 message authentication code.

    ``size`` is the tag length in bytes, from 1 to 8. To conform to RFC 5830
    the ``iv`` is the first block of the authenticated data; the following
    blocks are fed to :meth:`update`.
    """

    block_size = BLOCK_SIZE

    def __init__(self, cipher: Cipher, size: int, iv: bytes) -> None:
        if not 1 <= size <= BLOCK_SIZE:
            raise ValueError("invalid tag size")
        iv = bytes(iv)
        if len(iv) != BLOCK_SIZE:
            raise ValueError("len(iv) != 8")
        self.cipher = cipher
        self.digest_size = size
        self._iv = iv
        self.reset()

    def reset(self) -> None:
        """Return to the state right after construction."""
        self._prev = self._iv
        self._buf = b""

    def _step(self, block: bytes) -> bytes:
        n1, n2 = self.cipher.xcrypt(SEQ_MAC, *block_to_halves(block))
        return halves_to_block(n2, n1)

    def update(self, data: bytes) -> None:
        """Feed more data into the MAC."""
        buf = self._buf + bytes(data)
        prev = self._prev
        while len(buf) >= BLOCK_SIZE:
            prev = self._step(_xor(prev, buf[:BLOCK_SIZE]))
            buf = buf[BLOCK_SIZE:]
        self._prev = prev
        self._buf = buf

    def digest(self) -> bytes:
        """Return the tag without altering the state."""
        if not self._buf:
            return self._prev[: self.digest_size]
        padded = self._buf.ljust(BLOCK_SIZE, b"\x00")
        return self._step(_xor(padded, self._prev))[: self.digest_size]

    def hexdigest(self) -> str:
        """Return the tag as a hexadecimal string."""
        return self.digest().hex()