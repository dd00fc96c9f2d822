import random

import pytest

from edwards25519.constants import (
    BASEPOINT_ORDER,
    ED25519_BASEPOINT_POINT,
    ED25519_BASEPOINT_TABLE,
)
from edwards25519.edwards import CompressedEdwardsY, EdwardsPoint
from edwards25519.multiscalar import (
    multiscalar_mul,
    optional_multiscalar_mul,
    vartime_double_scalar_mul_basepoint,
    vartime_multiscalar_mul,
)

A_SCALAR = int.from_bytes(
    bytes(
        [
            0x1A, 0x0E, 0x97, 0x8A, 0x90, 0xF6, 0x62, 0x2D,
            0x37, 0x47, 0x02, 0x3F, 0x8A, 0xD8, 0x26, 0x4D,
            0xA7, 0x58, 0xAA, 0x1B, 0x88, 0xE0, 0x40, 0xD1,
            0x58, 0x9E, 0x7B, 0x7F, 0x23, 0x76, 0xEF, 0x09,
        ]
    ),
    "little",
)

B_SCALAR = int.from_bytes(
    bytes(
        [
            0x91, 0x26, 0x7A, 0xCF, 0x25, 0xC2, 0x09, 0x1B,
            0xA2, 0x17, 0x74, 0x7B, 0x66, 0xF0, 0xB3, 0x2E,
            0x9D, 0xF2, 0xA5, 0x67, 0x41, 0xCF, 0xDA, 0xC4,
            0x56, 0xA7, 0xD4, 0xAA, 0xB8, 0x60, 0x8A, 0x05,
        ]
    ),
    "little",
)

A_TIMES_BASEPOINT = CompressedEdwardsY(
    bytes(
        [
            0xEA, 0x27, 0xE2, 0x60, 0x53, 0xDF, 0x1B, 0x59,
            0x56, 0xF1, 0x4D, 0x5D, 0xEC, 0x3C, 0x34, 0xC3,
            0x84, 0xA2, 0x69, 0xB7, 0x4C, 0xC3, 0x80, 0x3E,
            0xA8, 0xE2, 0xE7, 0xC9, 0x42, 0x5E, 0x40, 0xA5,
        ]
    )
)

DOUBLE_SCALAR_MULT_RESULT = CompressedEdwardsY(
    bytes(
        [
            0x7D, 0xFD, 0x6C, 0x45, 0xAF, 0x6D, 0x6E, 0x0E,
            0xBA, 0x20, 0x37, 0x1A, 0x23, 0x64, 0x59, 0xC4,
            0xC0, 0x46, 0x83, 0x43, 0xDE, 0x70, 0x4B, 0x85,
            0x09, 0x6F, 0xFE, 0x35, 0x4F, 0x13, 0x2B, 0x42,
        ]
    )
)


def _a_point() -> EdwardsPoint:
    point = A_TIMES_BASEPOINT.decompress()
    assert point is not None
    return point


def test_double_scalar_mul_basepoint_vs_ed25519py():
    result = vartime_double_scalar_mul_basepoint(A_SCALAR, _a_point(), B_SCALAR)
    assert result.compress() == DOUBLE_SCALAR_MULT_RESULT


def test_double_scalar_mul_basepoint_with_zero_scalars_is_identity():
    result = vartime_double_scalar_mul_basepoint(0, _a_point(), 0)
    assert result.is_identity()


def test_double_scalar_mul_basepoint_only_basepoint_term():
    result = vartime_double_scalar_mul_basepoint(0, _a_point(), A_SCALAR)
    assert result.compress() == A_TIMES_BASEPOINT


def test_multiscalar_mul_vs_ed25519py():
    result = vartime_multiscalar_mul(
        [A_SCALAR, B_SCALAR], [_a_point(), ED25519_BASEPOINT_POINT]
    )
    assert result.compress() == DOUBLE_SCALAR_MULT_RESULT


def test_multiscalar_mul_vartime_vs_consttime():
    points = [_a_point(), ED25519_BASEPOINT_POINT]
    result_vartime = vartime_multiscalar_mul([A_SCALAR, B_SCALAR], points)
    result_consttime = multiscalar_mul([A_SCALAR, B_SCALAR], points)
    assert result_vartime.compress() == result_consttime.compress()
    assert result_consttime.compress() == DOUBLE_SCALAR_MULT_RESULT


def _multiscalar_consistency(n: int, seed: int) -> None:
    rng = random.Random(seed)
    xs = [rng.randrange(BASEPOINT_ORDER) for _ in range(n)]
    xs.append((1 << 255) - 1)
    check = sum(x * x for x in xs) % BASEPOINT_ORDER

    gs = [x * ED25519_BASEPOINT_TABLE for x in xs]

    h1 = multiscalar_mul(xs, gs)
    h2 = vartime_multiscalar_mul(xs, gs)
    h3 = check * ED25519_BASEPOINT_TABLE

    assert h1 == h3
    assert h2 == h3


@pytest.mark.parametrize("n", [0, 5, 20])
def test_multiscalar_consistency_small(n):
    _multiscalar_consistency(n, seed=n + 1)


def test_multiscalar_consistency_pippenger_path():
    _multiscalar_consistency(200, seed=7)


def test_optional_multiscalar_mul_returns_none_for_missing_point():
    result = optional_multiscalar_mul(
        [A_SCALAR, B_SCALAR], [_a_point(), None]
    )
    assert result is None


def test_optional_multiscalar_mul_matches_known_value():
    result = optional_multiscalar_mul(
        [A_SCALAR, B_SCALAR], [_a_point(), ED25519_BASEPOINT_POINT]
    )
    assert result is not None
    assert result.compress() == DOUBLE_SCALAR_MULT_RESULT


def test_vartime_multiscalar_mul_rejects_missing_point():
    with pytest.raises(ValueError):
        vartime_multiscalar_mul([A_SCALAR], [None])


@pytest.mark.parametrize(
    "func", [multiscalar_mul, optional_multiscalar_mul, vartime_multiscalar_mul]
)
def test_length_mismatch_raises(func):
    with pytest.raises(ValueError):
        func([A_SCALAR, B_SCALAR], [ED25519_BASEPOINT_POINT])


def test_empty_multiscalar_mul_is_identity():
    assert multiscalar_mul([], []).is_identity()
    assert vartime_multiscalar_mul([], []).is_identity()