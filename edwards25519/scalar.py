"""Scalars for the Ed25519 group and their signed-digit recodings.

Scalars are plain Python integers.  The recoding functions work on the
integer exactly as given, without reducing it modulo the group order.
"""

L = 2**252 + 27742317777372353535851937790883648493
"""The order of the prime-order subgroup (and of the Ed25519 basepoint)."""

_LOW_255_BITS = (1 << 255) - 1


def _require_32_bytes(data) -> bytes:
    raw = bytes(data)
    if len(raw) != 32:
        raise ValueError(f"expected 32 bytes, got {len(raw)}")
    return raw


def _check_range(k, limit: int) -> None:
    if not isinstance(k, int) or k < 0 or k >= limit:
        raise ValueError(f"scalar out of range [0, 2**{limit.bit_length() - 1})")


def from_bytes_mod_order(data) -> int:
    """Interpret 32 little-endian bytes as an integer reduced modulo L."""
    return int.from_bytes(_require_32_bytes(data), "little") % L


def from_bits(data) -> int:
    """Interpret 32 little-endian bytes as a 255-bit integer, unreduced."""
    return int.from_bytes(_require_32_bytes(data), "little") & _LOW_255_BITS


def to_radix_16(k: int) -> list[int]:
    """Write ``k`` in radix 16 with 64 digits in [-8, 8), the last in [-8, 8].

    Requires ``0 <= k < 2**255``.
    """
    _check_range(k, 1 << 255)
    nibbles = [(k >> (4 * i)) & 15 for i in range(64)]
    digits = []
    carry = 0
    for nibble in nibbles[:-1]:
        digit = nibble + carry
        carry = (digit + 8) >> 4
        digits.append(digit - (carry << 4))
    digits.append(nibbles[-1] + carry)
    return digits


def radix_2w_size_hint(w: int) -> int:
    """Number of digits produced by :func:`to_radix_2w` for window ``w``."""
    if 4 <= w <= 7:
        return (256 + w - 1) // w
    if w == 8:
        return (256 + w - 1) // w + 1
    raise ValueError("window width must be between 4 and 8")


def to_radix_2w(k: int, w: int) -> list[int]:
    """Write ``k`` in radix ``2**w`` with signed digits in [-2**(w-1), 2**(w-1)).

    Only the last digit may reach ``2**(w-1)``.  Requires ``4 <= w <= 8``.
    """
    count = radix_2w_size_hint(w)
    if w == 4:
        return to_radix_16(k)
    _check_range(k, 1 << 256)

    radix = 1 << w
    mask = radix - 1
    windows = (256 + w - 1) // w
    digits = []
    carry = 0
    for i in range(windows):
        coef = carry + ((k >> (i * w)) & mask)
        carry = (coef + radix // 2) >> w
        digits.append(coef - (carry << w))

    if w == 8:
        digits.append(carry)
    else:
        digits[-1] += carry << w
    assert len(digits) == count
    return digits


def non_adjacent_form(k: int, w: int) -> list[int]:
    """Compute the width-``w`` non-adjacent form of ``k`` as 256 digits.

    Every nonzero digit is odd and lies in (-2**(w-1), 2**(w-1)); any
    ``w`` consecutive digits hold at most one nonzero.  Requires
    ``2 <= w <= 8``.
    """
    if not 2 <= w <= 8:
        raise ValueError("NAF width must be between 2 and 8")
    _check_range(k, 1 << 256)

    width = 1 << w
    mask = width - 1
    naf = [0] * 256
    pos = 0
    carry = 0
    while pos < 256:
        window = carry + ((k >> pos) & mask)
        if not window & 1:
            # An even window keeps the carry as it is.
            pos += 1
            continue
        if window < width // 2:
            carry = 0
            naf[pos] = window
        else:
            carry = 1
            naf[pos] = window - width
        pos += w
    return naf