"""GOST R 34.10 private and public keys, signatures and VKO key agreement."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass

from gostcrypto.gost3410.curve import Curve

__all__ = [
    "RandomSource",
    "PrivateKey",
    "PublicKey",
    "PrivateKeyReverseDigest",
    "PrivateKeyReverseDigestAndSignature",
    "new_ukm",
    "gen_private_key",
]

RandomSource = Callable[[int], bytes]
"""A callable returning the requested number of random bytes."""


def _read_full(rand: RandomSource, size: int) -> bytes:
    data = bytes(rand(size))
    if len(data) != size:
        raise EOFError("random source returned too few bytes")
    return data


def _inverse_or_zero(value: int, modulus: int) -> int:
    try:
        return pow(value % modulus, -1, modulus)
    except ValueError:
        return 0


def new_ukm(raw: bytes) -> int:
    """Build user keying material (VKO factor) from its little-endian form."""
    return int.from_bytes(bytes(raw), "little")


def gen_private_key(curve: Curve, rand: RandomSource = os.urandom) -> PrivateKey:
    """Generate a private key on ``curve`` from the random source."""
    return PrivateKey.from_raw(curve, _read_full(rand, curve.point_size()))


@dataclass(frozen=True)
class PrivateKey:
    """A private key: a scalar on a curve."""

    curve: Curve
    key: int

    @classmethod
    def from_raw(cls, curve: Curve, raw: bytes) -> PrivateKey:
        """Load a key from its little-endian raw form."""
        size = curve.point_size()
        raw = bytes(raw)
        if len(raw) != size:
            raise ValueError(f"len(key) != {size}")
        k = int.from_bytes(raw, "little")
        if k == 0:
            raise ValueError("zero private key")
        return cls(curve, k % curve.q)

    def raw(self) -> bytes:
        """Return the little-endian raw form of the key."""
        return self.key.to_bytes(self.curve.point_size(), "little")

    def public_key(self) -> PublicKey:
        """Derive the matching public key."""
        c = self.curve
        x, y = c.exp(self.key, c.x, c.y)
        return PublicKey(c, x, y)

    def sign_digest(self, digest: bytes, rand: RandomSource = os.urandom) -> bytes:
        """Sign a digest, returning ``s || r`` big-endian."""
        c = self.curve
        q = c.q
        size = c.point_size()
        e = int.from_bytes(bytes(digest), "big") % q
        if e == 0:
            e = 1
        while True:
            k = int.from_bytes(_read_full(rand, size), "big") % q
            if k == 0:
                continue
            r = c.exp(k, c.x, c.y)[0] % q
            if r == 0:
                continue
            s = (self.key * r + k * e) % q
            if s == 0:
                continue
            return s.to_bytes(size, "big") + r.to_bytes(size, "big")

    def sign(self, rand: RandomSource, digest: bytes) -> bytes:
        """Sign a digest; same as :meth:`sign_digest` with arguments swapped."""
        return self.sign_digest(digest, rand)

    def public(self) -> PublicKey:
        """Return the matching public key."""
        return self.public_key()

    def kek(self, pub: PublicKey, ukm: int) -> bytes:
        """Compute the raw shared point for VKO key agreement."""
        c = self.curve
        kx, ky = c.exp(self.key, pub.x, pub.y)
        u = ukm * c.co
        if u != 1:
            kx, ky = c.exp(u, kx, ky)
        return PublicKey(c, kx, ky).raw()


@dataclass(frozen=True, eq=False)
class PublicKey:
    """A public key: a point on a curve."""

    curve: Curve
    x: int
    y: int

    @classmethod
    def from_raw(cls, curve: Curve, raw: bytes) -> PublicKey:
        """Load a key from little-endian X followed by little-endian Y."""
        size = curve.point_size()
        raw = bytes(raw)
        if len(raw) != 2 * size:
            raise ValueError(f"len(key) != {2 * size}")
        return cls(
            curve,
            int.from_bytes(raw[:size], "little"),
            int.from_bytes(raw[size:], "little"),
        )

    def raw(self) -> bytes:
        """Return little-endian X followed by little-endian Y."""
        size = self.curve.point_size()
        return self.x.to_bytes(size, "little") + self.y.to_bytes(size, "little")

    def verify_digest(self, digest: bytes, signature: bytes) -> bool:
        """Check a ``s || r`` signature over a digest."""
        c = self.curve
        size = c.point_size()
        signature = bytes(signature)
        if len(signature) != 2 * size:
            raise ValueError(f"len(signature) != {2 * size}")
        s = int.from_bytes(signature[:size], "big")
        r = int.from_bytes(signature[size:], "big")
        if not (0 < r < c.q and 0 < s < c.q):
            return False
        p, q = c.p, c.q
        e = int.from_bytes(bytes(digest), "big") % q
        if e == 0:
            e = 1
        v = _inverse_or_zero(e, q)
        z1 = s * v % q
        z2 = q - r * v % q
        p1x, p1y = c.exp(z1, c.x, c.y)
        q1x, q1y = c.exp(z2, self.x, self.y)
        lm = _inverse_or_zero(q1x - p1x, p)
        lm = lm * (q1y - p1y) % p
        lm = lm * lm % p
        lm = (lm - p1x - q1x) % p
        return lm % q == r

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return False
        return self.x == other.x and self.y == other.y and self.curve == other.curve

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.curve))


@dataclass(frozen=True)
class PrivateKeyReverseDigest:
    """Signer that reverses the digest before signing."""

    prv: PrivateKey

    def public(self) -> PublicKey:
        """Return the matching public key."""
        return self.prv.public()

    def sign(self, rand: RandomSource, digest: bytes) -> bytes:
        """Sign the byte-reversed digest."""
        return self.prv.sign(rand, bytes(digest)[::-1])


@dataclass(frozen=True)
class PrivateKeyReverseDigestAndSignature:
    """Signer that reverses both the digest and the resulting signature."""

    prv: PrivateKey

    def public(self) -> PublicKey:
        """Return the matching public key."""
        return self.prv.public()

    def sign(self, rand: RandomSource, digest: bytes) -> bytes:
        """Sign the byte-reversed digest and reverse the signature."""
        return self.prv.sign(rand, bytes(digest)[::-1])[::-1]