"""Elliptic curves for GOST R 34.10-2001 and GOST R 34.10-2012.

Covers the signature algorithms of RFC 5832 and RFC 7091 and the VKO key
agreement functions of RFC 4357 and RFC 7836: curve arithmetic in
Weierstrass form and conversion to and from twisted Edwards form.
"""

from __future__ import annotations

__all__ = ["Curve", "point_size", "xy_to_uv", "uv_to_xy"]


def point_size(p: int) -> int:
    """Return the byte size of a coordinate for a field of characteristic ``p``."""
    return 64 if p.bit_length() > 256 else 32


def _inverse(value: int, modulus: int) -> int:
    try:
        return pow(value % modulus, -1, modulus)
    except ValueError:
        raise ValueError("value has no modular inverse") from None


class Curve:
    """Elliptic curve y^2 = x^3 + a*x + b over the prime field of ``p``.

    ``q`` is the order of the subgroup generated by the base point
    (``x``, ``y``), ``co`` the cofactor, and ``e``/``d`` the coefficients of
    the equivalent twisted Edwards curve when there is one.
    """

    __slots__ = ("name", "p", "q", "a", "b", "x", "y", "e", "d", "co", "_ed_st")

    def __init__(
        self,
        p: int,
        q: int,
        a: int,
        b: int,
        x: int,
        y: int,
        e: int | None = None,
        d: int | None = None,
        co: int | None = None,
        name: str = "unknown",
    ) -> None:
        lhs = (y * y) % p
        rhs = ((x * x + a) * x + b) % p
        if lhs != rhs:
            raise ValueError("invalid curve parameters")
        self.name = name
        self.p = p
        self.q = q
        self.a = a
        self.b = b
        self.x = x
        self.y = y
        if e is not None and d is not None:
            self.e: int | None = e
            self.d: int | None = d
        else:
            self.e = None
            self.d = None
        self.co = 1 if co is None else co
        self._ed_st: tuple[int, int] | None = None

    def point_size(self) -> int:
        """Return the byte size of one coordinate on this curve."""
        return point_size(self.p)

    def _add(self, p1x: int, p1y: int, p2x: int, p2y: int) -> tuple[int, int]:
        p = self.p
        if p1x == p2x and p1y == p2y:
            t = (3 * p1x * p1x + self.a) * _inverse(2 * p1y, p) % p
        else:
            t = _inverse((p2x - p1x) % p, p) * ((p2y - p1y) % p) % p
        rx = (t * t - p1x - p2x) % p
        ry = ((p1x - rx) * t - p1y) % p
        return rx, ry

    def exp(self, degree: int, x: int, y: int) -> tuple[int, int]:
        """Multiply the point (``x``, ``y``) by the positive integer ``degree``."""
        if degree == 0:
            raise ValueError("zero degree value")
        if degree < 0:
            raise ValueError("negative degree value")
        dg = degree - 1
        tx, ty = x, y
        cx, cy = x, y
        while dg:
            if dg & 1:
                tx, ty = self._add(tx, ty, cx, cy)
            dg >>= 1
            cx, cy = self._add(cx, cy, cx, cy)
        return tx, ty

    def is_edwards(self) -> bool:
        """Tell whether the curve has a twisted Edwards form."""
        return self.e is not None

    def edwards_st(self) -> tuple[int, int]:
        """Return the cached s and t parameters for Edwards conversions."""
        if self._ed_st is None:
            if self.e is None or self.d is None:
                raise ValueError("non twisted Edwards curve")
            p = self.p
            s = (self.e - self.d) % p * _inverse(4, p) % p
            t = (self.e + self.d) * _inverse(6, p) % p
            self._ed_st = (s, t)
        return self._ed_st

    def _key(self) -> tuple:
        return (self.p, self.q, self.a, self.b, self.x, self.y, self.e, self.d, self.co)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Curve(name={self.name!r}, bits={self.p.bit_length()})"


def xy_to_uv(curve: Curve, x: int, y: int) -> tuple[int, int]:
    """Convert Weierstrass coordinates to twisted Edwards coordinates."""
    if not curve.is_edwards():
        raise ValueError("non twisted Edwards curve")
    s, t = curve.edwards_st()
    p = curve.p
    shifted = (x - t) % p
    u = _inverse(y, p) * shifted % p
    v = (shifted - s) % p * _inverse(shifted + s, p) % p
    return u, v


def uv_to_xy(curve: Curve, u: int, v: int) -> tuple[int, int]:
    """Convert twisted Edwards coordinates to Weierstrass coordinates."""
    if not curve.is_edwards():
        raise ValueError("non twisted Edwards curve")
    s, t = curve.edwards_st()
    p = curve.p
    tx = (1 + v) * s % p
    ty = (1 - v) % p
    x = (_inverse(ty, p) * tx + t) % p
    y = _inverse(u * ty, p) * tx % p
    return x, y