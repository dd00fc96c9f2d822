"""Variable-time multiscalar multiplication by Pippenger's bucket method.

Each scalar is written in signed radix 2**w.  For every digit position
the points are sorted into buckets by digit, the buckets are combined
with running sums, and the columns are joined by ``w`` doublings each.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .edwards import EdwardsPoint
from .scalar import radix_2w_size_hint, to_radix_2w


def _window_width(size: int) -> int:
    if size < 500:
        return 6
    if size < 800:
        return 7
    return 8


def _columns(
    pairs: list[tuple[list[int], EdwardsPoint]], digits_count: int, buckets_count: int
) -> Iterator[EdwardsPoint]:
    """Yield the weighted bucket sum of each digit column, highest first."""
    for digit_index in reversed(range(digits_count)):
        buckets = [EdwardsPoint.identity()] * buckets_count
        for digits, point in pairs:
            digit = digits[digit_index]
            if digit > 0:
                buckets[digit - 1] = buckets[digit - 1] + point
            elif digit < 0:
                buckets[-digit - 1] = buckets[-digit - 1] - point

        # Sum of k * bucket[k-1] as a sum of running suffix sums.
        intermediate = buckets[-1]
        total = buckets[-1]
        for bucket in reversed(buckets[:-1]):
            intermediate = intermediate + bucket
            total = total + intermediate
        yield total


def pippenger_optional_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[Optional[EdwardsPoint]]
) -> Optional[EdwardsPoint]:
    """Compute the sum of ``s_i * P_i`` in variable time.

    Returns None if any point is None; raises ValueError when the
    numbers of scalars and points differ.
    """
    scalar_list = list(scalars)
    point_list = list(points)
    if len(scalar_list) != len(point_list):
        raise ValueError(
            f"got {len(scalar_list)} scalars but {len(point_list)} points"
        )
    if any(point is None for point in point_list):
        return None

    w = _window_width(len(scalar_list))
    digits_count = radix_2w_size_hint(w)
    buckets_count = (1 << w) // 2

    pairs = [(to_radix_2w(s, w), point) for s, point in zip(scalar_list, point_list)]
    columns = _columns(pairs, digits_count, buckets_count)

    result = next(columns)
    for column in columns:
        result = result.mul_by_pow_2(w) + column
    return result


def pippenger_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint]
) -> EdwardsPoint:
    """Compute the sum of ``s_i * P_i`` in variable time; points must be present."""
    point_list = list(points)
    if any(point is None for point in point_list):
        raise ValueError("points must not be None")
    result = pippenger_optional_multiscalar_mul(scalars, point_list)
    assert result is not None
    return result