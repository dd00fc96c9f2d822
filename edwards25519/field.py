"""Arithmetic in the prime field of integers modulo 2**255 - 19.

Field elements are plain Python integers; every function accepts any
integer and returns a value reduced into ``range(P)``.
"""

P = 2**255 - 19

_LOW_255_BITS = (1 << 255) - 1


def _require_32_bytes(data) -> bytes:
    raw = bytes(data)
    if len(raw) != 32:
        raise ValueError(f"expected 32 bytes, got {len(raw)}")
    return raw


def from_bytes(data) -> int:
    """Decode 32 little-endian bytes, ignoring the top bit of the last byte."""
    raw = _require_32_bytes(data)
    return (int.from_bytes(raw, "little") & _LOW_255_BITS) % P


def to_bytes(a: int) -> bytes:
    """Encode a field element canonically as 32 little-endian bytes."""
    return (a % P).to_bytes(32, "little")


def invert(a: int) -> int:
    """Return the multiplicative inverse of ``a``; zero maps to zero."""
    return pow(a % P, P - 2, P)


def is_negative(a: int) -> bool:
    """A field element is negative when its canonical encoding is odd."""
    return bool((a % P) & 1)


def _nonnegative(a: int) -> int:
    a %= P
    return (P - a) % P if a & 1 else a


SQRT_M1 = _nonnegative(pow(2, (P - 1) // 4, P))
"""The nonnegative square root of -1."""


def sqrt_ratio_i(u: int, v: int) -> tuple[bool, int]:
    """Compute the nonnegative square root of ``u/v`` where it exists.

    Returns ``(True, sqrt(u/v))`` when ``u/v`` is a square (including
    ``u == 0``), ``(False, 0)`` when ``u != 0`` and ``v == 0``, and
    ``(False, sqrt(i*u/v))`` when ``u/v`` is a non-square.
    """
    u %= P
    v %= P
    v3 = v * v % P * v % P
    v7 = v3 * v3 % P * v % P
    r = u * v3 % P * pow(u * v7 % P, (P - 5) // 8, P) % P
    check = v * r % P * r % P

    neg_u = (-u) % P
    correct_sign = check == u
    flipped_sign = check == neg_u
    flipped_sign_i = check == neg_u * SQRT_M1 % P

    if flipped_sign or flipped_sign_i:
        r = r * SQRT_M1 % P

    return correct_sign or flipped_sign, _nonnegative(r)


def invsqrt(a: int) -> tuple[bool, int]:
    """Compute ``1/sqrt(a)`` with the conventions of :func:`sqrt_ratio_i`."""
    return sqrt_ratio_i(1, a)


EDWARDS_D = (-121665 * invert(121666)) % P
"""The Edwards curve constant d = -121665/121666."""

EDWARDS_D2 = 2 * EDWARDS_D % P
"""Twice the Edwards curve constant d."""

# The negative root of a*d - 1 with a = -1.
SQRT_AD_MINUS_ONE = (-sqrt_ratio_i(-EDWARDS_D - 1, 1)[1]) % P