"""Multiscalar multiplication by Straus's interleaved-window method.

Provides a constant-time variant built on signed radix-16 digits, a
variable-time variant built on width-5 non-adjacent forms, and a
precomputation for repeated variable-time products over a fixed set of
static points.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .edwards import EdwardsPoint, _LookupTable
from .scalar import non_adjacent_form, to_radix_16

_NAF_WIDTH = 5


class _NafLookupTable:
    """The odd multiples [A, 3A, 5A, ...] of a point, indexed by odd digit."""

    __slots__ = ("_odd_multiples",)

    def __init__(self, point: EdwardsPoint, size: int) -> None:
        double = point.double()
        multiples = [point]
        for _ in range(size - 1):
            multiples.append(multiples[-1] + double)
        self._odd_multiples = tuple(multiples)

    def select(self, digit: int) -> EdwardsPoint:
        """Return ``digit * A`` for a positive odd ``digit``."""
        if digit <= 0 or not digit & 1 or digit // 2 >= len(self._odd_multiples):
            raise ValueError(f"digit {digit} not available in this table")
        return self._odd_multiples[digit // 2]


def _naf_table_5(point: EdwardsPoint) -> _NafLookupTable:
    return _NafLookupTable(point, 8)


def _naf_table_8(point: EdwardsPoint) -> _NafLookupTable:
    return _NafLookupTable(point, 64)


def _apply_naf_digit(
    acc: EdwardsPoint, table: _NafLookupTable, digit: int
) -> EdwardsPoint:
    if digit > 0:
        return acc + table.select(digit)
    if digit < 0:
        return acc - table.select(-digit)
    return acc


def _same_length(scalars: Iterable[int], points: Iterable) -> tuple[list, list]:
    scalar_list = list(scalars)
    point_list = list(points)
    if len(scalar_list) != len(point_list):
        raise ValueError(
            f"got {len(scalar_list)} scalars but {len(point_list)} points"
        )
    return scalar_list, point_list


def straus_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint]
) -> EdwardsPoint:
    """Compute the sum of ``s_i * P_i`` with a fixed sequence of operations."""
    scalar_list, point_list = _same_length(scalars, points)
    tables = [_LookupTable.of(point) for point in point_list]
    digit_rows = [to_radix_16(s) for s in scalar_list]

    result = EdwardsPoint.identity()
    for j in reversed(range(64)):
        result = result.mul_by_pow_2(4)
        for digits, table in zip(digit_rows, tables):
            result = result + table.select(digits[j])
    return result


def straus_optional_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[Optional[EdwardsPoint]]
) -> Optional[EdwardsPoint]:
    """Compute the sum of ``s_i * P_i`` in variable time.

    Returns None if any of the points is None.
    """
    scalar_list, point_list = _same_length(scalars, points)
    if any(point is None for point in point_list):
        return None
    nafs = [non_adjacent_form(s, _NAF_WIDTH) for s in scalar_list]
    tables = [_naf_table_5(point) for point in point_list]

    result = EdwardsPoint.identity()
    for i in reversed(range(256)):
        result = result.double()
        for naf, table in zip(nafs, tables):
            result = _apply_naf_digit(result, table, naf[i])
    return result


class VartimeEdwardsPrecomputation:
    """Precomputed tables for variable-time products over fixed static points."""

    def __init__(self, static_points: Iterable[EdwardsPoint]) -> None:
        self._static_tables = tuple(_naf_table_8(point) for point in static_points)

    def __len__(self) -> int:
        return len(self._static_tables)

    def optional_mixed_multiscalar_mul(
        self,
        static_scalars: Iterable[int],
        dynamic_scalars: Iterable[int],
        dynamic_points: Iterable[Optional[EdwardsPoint]],
    ) -> Optional[EdwardsPoint]:
        """Compute the sum over static and dynamic terms in variable time.

        Returns None if any dynamic point is None; raises ValueError when
        the numbers of scalars and points disagree.
        """
        static_nafs = [non_adjacent_form(s, _NAF_WIDTH) for s in static_scalars]
        dynamic_scalar_list, dynamic_point_list = _same_length(
            dynamic_scalars, dynamic_points
        )
        if len(static_nafs) != len(self._static_tables):
            raise ValueError(
                f"got {len(static_nafs)} static scalars "
                f"for {len(self._static_tables)} static points"
            )
        if any(point is None for point in dynamic_point_list):
            return None

        dynamic_nafs = [non_adjacent_form(s, _NAF_WIDTH) for s in dynamic_scalar_list]
        dynamic_tables = [_naf_table_5(point) for point in dynamic_point_list]

        result = EdwardsPoint.identity()
        for j in reversed(range(256)):
            result = result.double()
            for naf, table in zip(dynamic_nafs, dynamic_tables):
                result = _apply_naf_digit(result, table, naf[j])
            for naf, table in zip(static_nafs, self._static_tables):
                result = _apply_naf_digit(result, table, naf[j])
        return result

    def vartime_mixed_multiscalar_mul(
        self,
        static_scalars: Iterable[int],
        dynamic_scalars: Iterable[int],
        dynamic_points: Iterable[EdwardsPoint],
    ) -> EdwardsPoint:
        """Like :meth:`optional_mixed_multiscalar_mul`, for points that are all present."""
        point_list = list(dynamic_points)
        if any(point is None for point in point_list):
            raise ValueError("dynamic points must not be None")
        result = self.optional_mixed_multiscalar_mul(
            static_scalars, dynamic_scalars, point_list
        )
        assert result is not None
        return result