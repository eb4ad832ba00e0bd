# ecipkit

Small, dependency-free helpers for Curve25519 field arithmetic and for mapping
twisted Edwards points to short Weierstrass form.

## Modules

- `ecipkit.fields` — `FieldParams` describes a prime field whose elements are
  stored as fixed-width limbs (`name`, `modulus`, `nb_limbs`, `bits_per_limb`,
  `is_prime`, and the derived `capacity` in bits). `reduce(value)` returns
  `value % modulus`. Two fields are provided, each with four 64-bit limbs:
  `CURVE25519_FP` (the base field, 2^255 − 19) and `CURVE25519_FR` (the
  scalar field). Constructing a `FieldParams` whose modulus is below 2 or does
  not fit in its limbs raises `ValueError`.
- `ecipkit.element` — `Element` holds a field value as a tuple of limbs, least
  significant first, together with its `FieldParams`.
  `value_of(params, value)` builds one from an integer or a numeric string
  (decimal, or with a `0x`, `0o` or `0b` prefix). Values below zero or above
  the modulus are reduced modulo the field's prime; the modulus itself is kept
  as it is. `to_big_int(element)` recombines the limbs into one integer, and
  `int(element)` does the same.
- `ecipkit.shortweierstrass` — `WeierstrassParams` (`a`, `b`, `gx`, `gy`) and
  `wei25519_params()`, the coefficients and base point of Wei25519, the short
  Weierstrass curve birationally equivalent to Ed25519. Use it with the
  Curve25519 base and scalar fields.
- `ecipkit.twistededwards` — `CurveParams` (`a`, `d`, `gx`, `gy`) for curves
  `a·x² + y² = 1 + d·x²·y²`, `AffinePoint` (`x`, `y`, each an `Element`) and
  `Curve(params, base, scalar)`. `Curve.generator()` returns the base point.
  `Curve.to_weierstrass_point(point)` maps a point to short Weierstrass form:

  ```
  X = (5a + a·y − 5d·y − d) / (12 − 12y)
  Y = (a + a·y − d·y − d) / (4x − 4x·y)
  ```

  Coordinates must belong to the curve's base field, or `ValueError` is
  raised. A conversion whose denominator vanishes (`y = 1`, or `x = 0`) has no
  affine image and raises `ZeroDivisionError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

Map an Ed25519 point to Wei25519 coordinates:

```python
from ecipkit.element import to_big_int, value_of
from ecipkit.fields import CURVE25519_FP, CURVE25519_FR
from ecipkit.twistededwards import AffinePoint, Curve, CurveParams

params = CurveParams(
    a=0x7FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEC,
    d=0x52036CEE2B6FFE738CC740797779E89800700A4D4141D8AB75EB4DCA135978A3,
    gx=0x216936D3CD6E53FEC0A4E231FDD6DC5C692CC7609525A7B2C9562D608F25D51A,
    gy=0x6666666666666666666666666666666666666666666666666666666666666658,
)
curve = Curve(params, CURVE25519_FP, CURVE25519_FR)

point = AffinePoint(
    x=value_of(CURVE25519_FP, "15112221349535400772501151409588531511454012693041857206046113283949847762202"),
    y=value_of(CURVE25519_FP, "46316835694926478169428394003475163141307993866256225615783033603165251855960"),
)
wei = curve.to_weierstrass_point(point)
print(to_big_int(wei.x))  # 19210687000535497554771480197334579066178916638360430415404683479331899109173
print(to_big_int(wei.y))  # 18895136298852160426215908827706757709362468741134365248309716069351496097044
```

## What it does not do

This package converts points and stores field values; it does not add or
multiply curve points, check that a point lies on its curve, or build
zero-knowledge circuits or proofs. It has no command-line program.