import pytest

from edwards25519 import constants, field
from edwards25519.field import P


@pytest.mark.parametrize("i", range(8))
def test_eight_torsion(i):
    q = constants.EIGHT_TORSION[i].mul_by_pow_2(3)
    assert q.is_valid()
    assert q.is_identity()


@pytest.mark.parametrize("i", [0, 2, 4, 6])
def test_four_torsion(i):
    q = constants.EIGHT_TORSION[i].mul_by_pow_2(2)
    assert q.is_valid()
    assert q.is_identity()


@pytest.mark.parametrize("i", [0, 4])
def test_two_torsion(i):
    q = constants.EIGHT_TORSION[i].mul_by_pow_2(1)
    assert q.is_valid()
    assert q.is_identity()


def test_eight_torsion_generator_has_order_eight():
    by_four = constants.EIGHT_TORSION[1].mul_by_pow_2(2)
    by_eight = constants.EIGHT_TORSION[1].mul_by_pow_2(3)
    assert not by_four.is_identity()
    assert by_eight.is_identity()


def test_eight_torsion_starts_at_identity():
    assert constants.EIGHT_TORSION[0].is_identity()
    assert constants.EIGHT_TORSION_COMPRESSED[0].to_bytes() == b"\x01" + bytes(31)


def test_eight_torsion_order_two_point_is_y_minus_one():
    expected = bytes.fromhex(
        "ecffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff7f"
    )
    assert constants.EIGHT_TORSION_COMPRESSED[4].to_bytes() == expected


def test_eight_torsion_points_are_distinct():
    encodings = set()
    for i in range(8):
        compressed = constants.EIGHT_TORSION[i].compress()
        assert compressed == constants.EIGHT_TORSION_COMPRESSED[i]
        encodings.add(compressed.to_bytes())
    assert len(encodings) == 8


def test_sqrt_minus_one():
    minus_one = P - 1
    assert constants.SQRT_M1 * constants.SQRT_M1 % P == minus_one
    assert field.is_negative(constants.SQRT_M1) is False


def test_sqrt_constants_sign():
    minus_one = P - 1
    was_nonzero_square, invsqrt_m1 = field.invsqrt(minus_one)
    assert was_nonzero_square is True
    assert invsqrt_m1 * constants.SQRT_M1 % P == minus_one


def test_d_vs_ratio():
    a = (-121665) % P
    b = 121666
    d = a * field.invert(b) % P
    d2 = (d + d) % P
    assert d == constants.EDWARDS_D
    assert d2 == constants.EDWARDS_D2


def test_sqrt_ad_minus_one():
    a = P - 1
    ad_minus_one = (a * constants.EDWARDS_D + a) % P
    assert constants.SQRT_AD_MINUS_ONE * constants.SQRT_AD_MINUS_ONE % P == ad_minus_one
    was_square, root = field.sqrt_ratio_i(ad_minus_one, 1)
    assert was_square is True
    assert root in (constants.SQRT_AD_MINUS_ONE, P - constants.SQRT_AD_MINUS_ONE)


def test_basepoint_order_kills_basepoint():
    result = constants.ED25519_BASEPOINT_TABLE * constants.BASEPOINT_ORDER
    assert result.is_identity()
    assert result == constants.EIGHT_TORSION[0].mul_by_cofactor()
    assert constants.ED25519_BASEPOINT_POINT.is_torsion_free()


def test_basepoint_compresses_to_constant():
    compressed = constants.ED25519_BASEPOINT_POINT.compress()
    assert compressed == constants.ED25519_BASEPOINT_COMPRESSED


def test_basepoint_is_valid_and_torsion_free():
    assert constants.ED25519_BASEPOINT_POINT.is_valid()
    assert constants.ED25519_BASEPOINT_POINT.is_torsion_free()


def test_ed25519_basepoint_maps_to_x25519_basepoint():
    assert constants.ED25519_BASEPOINT_POINT.to_montgomery() == constants.X25519_BASEPOINT


def test_basepoint_table_holds_basepoint():
    assert constants.ED25519_BASEPOINT_TABLE.basepoint() == constants.ED25519_BASEPOINT_POINT