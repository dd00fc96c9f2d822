"""Curve constants: basepoints, the group order and the eight-torsion points."""

from __future__ import annotations

from .edwards import CompressedEdwardsY, EdwardsBasepointTable, EdwardsPoint
from .field import EDWARDS_D, EDWARDS_D2, SQRT_AD_MINUS_ONE, SQRT_M1
from .scalar import L

__all__ = [
    "BASEPOINT_ORDER",
    "ED25519_BASEPOINT_COMPRESSED",
    "ED25519_BASEPOINT_POINT",
    "ED25519_BASEPOINT_TABLE",
    "EDWARDS_D",
    "EDWARDS_D2",
    "EIGHT_TORSION",
    "EIGHT_TORSION_COMPRESSED",
    "RISTRETTO_BASEPOINT_COMPRESSED",
    "SQRT_AD_MINUS_ONE",
    "SQRT_M1",
    "X25519_BASEPOINT",
]

ED25519_BASEPOINT_COMPRESSED = CompressedEdwardsY(b"\x58" + b"\x66" * 31)
"""The Ed25519 basepoint: y = 4/5 with the sign bit of x cleared."""

X25519_BASEPOINT = b"\x09" + bytes(31)
"""The X25519 basepoint, as a Montgomery u-coordinate encoding."""

RISTRETTO_BASEPOINT_COMPRESSED = bytes.fromhex(
    "e2f2ae0a6abc4e71a884a961c500515f58e30b6aa582dd8db6a65945e08d2d76"
)
"""The Ristretto basepoint in its compressed encoding."""

BASEPOINT_ORDER = L
"""The order of the Ed25519 basepoint: 2**252 + 27742317777372353535851937790883648493."""


def _decompress(encoding: CompressedEdwardsY) -> EdwardsPoint:
    point = encoding.decompress()
    if point is None:
        raise ValueError(f"{encoding!r} is not a curve point")
    return point


ED25519_BASEPOINT_POINT = _decompress(ED25519_BASEPOINT_COMPRESSED)
"""The Ed25519 basepoint as an :class:`EdwardsPoint`."""

ED25519_BASEPOINT_TABLE = EdwardsBasepointTable(ED25519_BASEPOINT_POINT)
"""Precomputed multiples of the Ed25519 basepoint."""

_EIGHT_TORSION_GENERATOR = _decompress(
    CompressedEdwardsY(
        bytes.fromhex(
            "c7176a703d4dd84fba3c0b760d10670f2a2053fa2c39ccc64ec7fd7792ac037a"
        )
    )
)


def _multiples(point: EdwardsPoint, count: int) -> tuple[EdwardsPoint, ...]:
    result = [EdwardsPoint.identity()]
    while len(result) < count:
        result.append(result[-1] + point)
    return tuple(result)


EIGHT_TORSION = _multiples(_EIGHT_TORSION_GENERATOR, 8)
"""The eight-torsion subgroup: EIGHT_TORSION[i] is i times a point of order 8."""

EIGHT_TORSION_COMPRESSED = tuple(point.compress() for point in EIGHT_TORSION)
"""The eight-torsion points in compressed form."""