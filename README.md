# edwards25519

Pure-Python group arithmetic on the twisted Edwards form of Curve25519.

It offers:

- `CompressedEdwardsY`: the 32-byte "y plus sign of x" encoding, with
  `decompress()` returning `None` for bytes that are not a curve point.
- `EdwardsPoint`: points in extended coordinates, supporting `+`, `-`,
  negation, scalar multiplication with `*`, equality, `compress()`,
  `to_montgomery()`, `mul_by_cofactor()`, `is_small_order()` and
  `is_torsion_free()`.
- `EdwardsBasepointTable`: precomputed multiples of a point for fast
  fixed-base multiplication.
- Multiscalar multiplication: `multiscalar_mul`, `vartime_multiscalar_mul`,
  `optional_multiscalar_mul` and `vartime_double_scalar_mul_basepoint` in
  `edwards25519.multiscalar`, with Straus and Pippenger strategies in
  `edwards25519.straus` and `edwards25519.pippenger`, and
  `VartimeEdwardsPrecomputation` for repeated products against fixed points.
- Basepoints, the group order and torsion points in `edwards25519.constants`.

Scalars are Python integers. Field elements are integers modulo 2^255 - 19,
handled by `edwards25519.field`; scalar encodings and digit expansions are in
`edwards25519.scalar`.

## Installation

```
pip install .
```

## Example

```python
from edwards25519.constants import (
    BASEPOINT_ORDER,
    ED25519_BASEPOINT_POINT,
    ED25519_BASEPOINT_TABLE,
)
from edwards25519.edwards import CompressedEdwardsY
from edwards25519.multiscalar import vartime_multiscalar_mul

a = 0x1234
A = ED25519_BASEPOINT_TABLE * a
assert A == ED25519_BASEPOINT_POINT * a

encoded = A.compress()
assert CompressedEdwardsY(encoded.to_bytes()).decompress() == A

assert (ED25519_BASEPOINT_POINT * BASEPOINT_ORDER).is_identity()

R = vartime_multiscalar_mul([a, 7], [A, ED25519_BASEPOINT_POINT])
assert R == A * a + ED25519_BASEPOINT_POINT * 7
```

The arithmetic runs on Python integers and makes no constant-time
guarantees; do not use it where timing side channels matter.

## Tests

```
pip install .[test]
pytest
```