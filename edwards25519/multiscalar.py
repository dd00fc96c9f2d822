"""Multiscalar multiplication entry points for Edwards points.

These choose an algorithm for the size of the input: Straus's method
for the constant-time product and for small variable-time products,
Pippenger's bucket method for large variable-time products.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Optional

from .constants import ED25519_BASEPOINT_POINT
from .edwards import EdwardsPoint
from .pippenger import pippenger_optional_multiscalar_mul
from .scalar import non_adjacent_form
from .straus import (
    _apply_naf_digit,
    _naf_table_5,
    _naf_table_8,
    _NafLookupTable,
    straus_multiscalar_mul,
    straus_optional_multiscalar_mul,
)

_PIPPENGER_THRESHOLD = 190


def _same_length(scalars: Iterable[int], points: Iterable) -> tuple[list, list]:
    scalar_list = list(scalars)
    point_list = list(points)
    if len(scalar_list) != len(point_list):
        raise ValueError(
            f"got {len(scalar_list)} scalars but {len(point_list)} points"
        )
    return scalar_list, point_list


def multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint]
) -> EdwardsPoint:
    """Compute the sum of ``s_i * P_i`` with a fixed sequence of operations."""
    scalar_list, point_list = _same_length(scalars, points)
    return straus_multiscalar_mul(scalar_list, point_list)


def optional_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[Optional[EdwardsPoint]]
) -> Optional[EdwardsPoint]:
    """Compute the sum of ``s_i * P_i`` in variable time.

    Returns None if any point is None.  Fewer than 190 terms use
    Straus's method; more use Pippenger's.
    """
    scalar_list, point_list = _same_length(scalars, points)
    if len(scalar_list) < _PIPPENGER_THRESHOLD:
        return straus_optional_multiscalar_mul(scalar_list, point_list)
    return pippenger_optional_multiscalar_mul(scalar_list, point_list)


def vartime_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint]
) -> EdwardsPoint:
    """Compute the sum of ``s_i * P_i`` in variable time; points must be present."""
    point_list = list(points)
    if any(point is None for point in point_list):
        raise ValueError("points must not be None")
    result = optional_multiscalar_mul(scalars, point_list)
    assert result is not None
    return result


@lru_cache(maxsize=1)
def _basepoint_odd_table() -> _NafLookupTable:
    """Odd multiples [B, 3B, ..., 127B] of the Ed25519 basepoint."""
    return _naf_table_8(ED25519_BASEPOINT_POINT)


def vartime_double_scalar_mul_basepoint(
    a: int, point: EdwardsPoint, b: int
) -> EdwardsPoint:
    """Compute ``a*point + b*B`` in variable time, B being the Ed25519 basepoint."""
    a_naf = non_adjacent_form(a, 5)
    b_naf = non_adjacent_form(b, 8)

    start = max(
        (i for i in range(256) if a_naf[i] or b_naf[i]),
        default=0,
    )

    table_a = _naf_table_5(point)
    table_b = _basepoint_odd_table()

    result = EdwardsPoint.identity()
    for i in reversed(range(start + 1)):
        result = result.double()
        result = _apply_naf_digit(result, table_a, a_naf[i])
        result = _apply_naf_digit(result, table_b, b_naf[i])
    return result