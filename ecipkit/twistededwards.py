"""Twisted Edwards curves over emulated fields."""

from __future__ import annotations

from dataclasses import dataclass

from .element import Element, to_big_int, value_of
from .fields import FieldParams

__all__ = ["CurveParams", "AffinePoint", "Curve"]


@dataclass(frozen=True)
class CurveParams:
    """Curve a*x^2 + y^2 = 1 + d*x^2*y^2 with base point (gx, gy)."""

    a: int
    d: int
    gx: int
    gy: int


@dataclass(frozen=True)
class AffinePoint:
    """A point given by its affine coordinates."""

    x: Element
    y: Element


class Curve:
    """A twisted Edwards curve over ``base`` with scalars in ``scalar``."""

    def __init__(self, params: CurveParams, base: FieldParams, scalar: FieldParams) -> None:
        self.params = params
        self.base = base
        self.scalar = scalar
        self._g = AffinePoint(value_of(base, params.gx), value_of(base, params.gy))
        self._a = base.reduce(params.a)
        self._d = base.reduce(params.d)

    def generator(self) -> AffinePoint:
        """Return the base point of the curve."""
        return self._g

    def _coordinate(self, element: Element) -> int:
        if element.params != self.base:
            raise ValueError(
                f"coordinate belongs to {element.params.name}, expected {self.base.name}"
            )
        return self.base.reduce(to_big_int(element))

    def _divide(self, numerator: int, denominator: int) -> int:
        modulus = self.base.modulus
        denominator %= modulus
        if denominator == 0:
            raise ZeroDivisionError("division by zero in the base field")
        return numerator * pow(denominator, -1, modulus) % modulus

    def to_weierstrass_point(self, point: AffinePoint) -> AffinePoint:
        """Map ``point`` to short Weierstrass form.

        X = (5a + a*y - 5d*y - d) / (12 - 12y)
        Y = (a + a*y - d*y - d) / (4x - 4x*y)
        """
        x = self._coordinate(point.x)
        y = self._coordinate(point.y)
        a, d = self._a, self._d

        new_x = self._divide(5 * a + a * y - 5 * d * y - d, 12 - 12 * y)
        new_y = self._divide(a + a * y - d * y - d, 4 * x - 4 * x * y)
        return AffinePoint(value_of(self.base, new_x), value_of(self.base, new_y))