"""Group operations on the Edwards form of Curve25519.

Points are held in extended twisted Edwards coordinates (X:Y:Z:T) with
x = X/Z, y = Y/Z and xy = T/Z.  Scalars are integers in [0, 2**255).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Optional

from . import field
from .field import EDWARDS_D, EDWARDS_D2, P
from .scalar import L, to_radix_16


@dataclass(frozen=True)
class CompressedEdwardsY:
    """A point encoded as its y-coordinate plus the sign bit of x."""

    data: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.data)
        if len(raw) != 32:
            raise ValueError(f"expected 32 bytes, got {len(raw)}")
        object.__setattr__(self, "data", raw)

    @classmethod
    def identity(cls) -> CompressedEdwardsY:
        return cls(b"\x01" + bytes(31))

    @classmethod
    def from_slice(cls, data) -> CompressedEdwardsY:
        """Build from any 32-byte sequence; raises ValueError otherwise."""
        return cls(bytes(data))

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data

    def decompress(self) -> Optional[EdwardsPoint]:
        """Return the encoded point, or None if y is not on the curve."""
        y = field.from_bytes(self.data)
        yy = y * y % P
        u = (yy - 1) % P
        v = (yy * EDWARDS_D + 1) % P
        is_valid_y, x = field.sqrt_ratio_i(u, v)
        if not is_valid_y:
            return None
        if self.data[31] >> 7:
            x = (-x) % P
        return EdwardsPoint(x, y, 1, x * y % P)

    def __repr__(self) -> str:
        return f"CompressedEdwardsY({self.data.hex()})"


@dataclass(frozen=True, eq=False)
class EdwardsPoint:
    """A point on the Edwards curve in extended coordinates."""

    X: int
    Y: int
    Z: int
    T: int

    def __post_init__(self) -> None:
        for name in ("X", "Y", "Z", "T"):
            object.__setattr__(self, name, getattr(self, name) % P)

    @classmethod
    def identity(cls) -> EdwardsPoint:
        return cls(0, 1, 1, 0)

    def is_identity(self) -> bool:
        return self == EdwardsPoint.identity()

    def is_valid(self) -> bool:
        """Check the curve equation and the Segre relation XY = ZT."""
        XX = self.X * self.X % P
        YY = self.Y * self.Y % P
        ZZ = self.Z * self.Z % P
        lhs = (YY - XX) * ZZ % P
        rhs = (ZZ * ZZ + EDWARDS_D * XX % P * YY) % P
        on_curve = lhs == rhs
        on_segre = self.X * self.Y % P == self.Z * self.T % P
        return on_curve and on_segre

    def _affine(self) -> tuple[int, int]:
        recip = field.invert(self.Z)
        return self.X * recip % P, self.Y * recip % P

    def compress(self) -> CompressedEdwardsY:
        x, y = self._affine()
        encoded = bytearray(field.to_bytes(y))
        encoded[31] ^= field.is_negative(x) << 7
        return CompressedEdwardsY(bytes(encoded))

    def to_montgomery(self) -> bytes:
        """Encode the Montgomery u-coordinate u = (1+y)/(1-y).

        The identity is sent to the 2-torsion point u = 0.
        """
        u = (self.Z + self.Y) * field.invert(self.Z - self.Y) % P
        return field.to_bytes(u)

    def double(self) -> EdwardsPoint:
        A = self.X * self.X % P
        B = self.Y * self.Y % P
        C = 2 * self.Z * self.Z % P
        H = A + B
        XY = self.X + self.Y
        E = H - XY * XY
        G = A - B
        F = C + G
        return EdwardsPoint(E * F, G * H, F * G, E * H)

    def mul_by_pow_2(self, k: int) -> EdwardsPoint:
        """Compute [2**k]P by successive doublings; requires k > 0."""
        if k <= 0:
            raise ValueError("k must be positive")
        result = self
        for _ in range(k):
            result = result.double()
        return result

    def mul_by_cofactor(self) -> EdwardsPoint:
        return self.mul_by_pow_2(3)

    def is_small_order(self) -> bool:
        """True if the point lies in the eight-torsion subgroup."""
        return self.mul_by_cofactor().is_identity()

    def is_torsion_free(self) -> bool:
        """True if the point lies in the prime-order subgroup."""
        return (self * L).is_identity()

    def __add__(self, other: EdwardsPoint) -> EdwardsPoint:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        A = (self.Y - self.X) * (other.Y - other.X) % P
        B = (self.Y + self.X) * (other.Y + other.X) % P
        C = self.T * EDWARDS_D2 % P * other.T % P
        D = 2 * self.Z * other.Z % P
        E = B - A
        F = D - C
        G = D + C
        H = B + A
        return EdwardsPoint(E * F, G * H, F * G, E * H)

    def __sub__(self, other: EdwardsPoint) -> EdwardsPoint:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> EdwardsPoint:
        return EdwardsPoint(-self.X, self.Y, self.Z, -self.T)

    def __mul__(self, scalar: int) -> EdwardsPoint:
        if not isinstance(scalar, int):
            return NotImplemented
        digits = to_radix_16(scalar)
        table = _LookupTable.of(self)
        result = EdwardsPoint.identity()
        for digit in reversed(digits):
            result = result.mul_by_pow_2(4) + table.select(digit)
        return result

    def __rmul__(self, scalar: int) -> EdwardsPoint:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        return (
            self.X * other.Z % P == other.X * self.Z % P
            and self.Y * other.Z % P == other.Y * self.Z % P
        )

    def __hash__(self) -> int:
        return hash(self.compress().data)


class _LookupTable:
    """The multiples [P, 2P, ..., 8P] of a point, indexed by signed digit."""

    __slots__ = ("_multiples",)

    def __init__(self, multiples: tuple[EdwardsPoint, ...]) -> None:
        self._multiples = multiples

    @classmethod
    def of(cls, point: EdwardsPoint) -> _LookupTable:
        multiples = [point]
        for _ in range(7):
            multiples.append(multiples[-1] + point)
        return cls(tuple(multiples))

    def select(self, digit: int) -> EdwardsPoint:
        if not -8 <= digit <= 8:
            raise ValueError("digit out of range [-8, 8]")
        if digit == 0:
            return EdwardsPoint.identity()
        chosen = self._multiples[abs(digit) - 1]
        return -chosen if digit < 0 else chosen


class EdwardsBasepointTable:
    """Precomputed multiples of a basepoint for fixed-base multiplication.

    Table i holds [1..8] * 16**(2i) * B for i in 0..31.
    """

    def __init__(self, basepoint: EdwardsPoint) -> None:
        tables = []
        point = basepoint
        for _ in range(32):
            tables.append(_LookupTable.of(point))
            point = point.mul_by_pow_2(8)
        self._tables = tuple(tables)

    def basepoint(self) -> EdwardsPoint:
        return EdwardsPoint.identity() + self._tables[0].select(1)

    def __mul__(self, scalar: int) -> EdwardsPoint:
        if not isinstance(scalar, int):
            return NotImplemented
        digits = to_radix_16(scalar)
        result = EdwardsPoint.identity()
        for table, digit in zip(self._tables, digits[1::2]):
            result = result + table.select(digit)
        result = result.mul_by_pow_2(4)
        for table, digit in zip(self._tables, digits[0::2]):
            result = result + table.select(digit)
        return result

    def __rmul__(self, scalar: int) -> EdwardsPoint:
        return self.__mul__(scalar)

    def __repr__(self) -> str:
        return f"EdwardsBasepointTable(basepoint={self.basepoint().compress()!r})"


def sum_points(points: Iterable[EdwardsPoint]) -> EdwardsPoint:
    """Add up points; the empty sum is the identity."""
    return reduce(lambda acc, p: acc + p, points, EdwardsPoint.identity())