"""Short Weierstrass curves ``y^2 = x^3 + ax + b`` and their affine points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from toycrypto.field import (
    PLUTO_BASE_FIELD,
    PLUTO_BASE_FIELD_EXTENSION,
    Fp,
    Fp2,
    PrimeField,
    QuadraticExtension,
)

__all__ = [
    "EllipticCurve",
    "AffinePoint",
    "PLUTO_BASE_CURVE",
    "PLUTO_EXTENDED_CURVE",
]

Field = Union[PrimeField, QuadraticExtension]
Element = Union[Fp, Fp2]


def _lift(field: Field, value) -> Element:
    if isinstance(field, QuadraticExtension):
        return field.embed(value)
    return field(value)


@dataclass(frozen=True)
class EllipticCurve:
    """Curve ``y^2 = x^3 + ax + b`` over ``field`` with a group generator of ``order``."""

    field: Field
    a: Element
    b: Element
    order: int
    generator: Optional[Tuple[Element, Element]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", _lift(self.field, self.a))
        object.__setattr__(self, "b", _lift(self.field, self.b))
        if self.generator is not None:
            gx, gy = self.generator
            object.__setattr__(
                self, "generator", (_lift(self.field, gx), _lift(self.field, gy))
            )


class AffinePoint:
    """A point of an :class:`EllipticCurve`, or the point at infinity."""

    __slots__ = ("_curve", "_x", "_y")

    def __init__(self, curve: EllipticCurve, x, y) -> None:
        self._curve = curve
        self._x = _lift(curve.field, x)
        self._y = _lift(curve.field, y)
        if not self.is_on_curve():
            raise ValueError("Point is not on curve")

    @classmethod
    def _unchecked(cls, curve: EllipticCurve, x, y) -> "AffinePoint":
        point = object.__new__(cls)
        point._curve, point._x, point._y = curve, x, y
        return point

    @classmethod
    def infinity(cls, curve: EllipticCurve) -> "AffinePoint":
        """The point at infinity, the group identity."""
        return cls._unchecked(curve, None, None)

    @classmethod
    def generator(cls, curve: EllipticCurve) -> "AffinePoint":
        """The curve's designated generator point."""
        if curve.generator is None:
            raise ValueError("curve has no generator")
        return cls(curve, *curve.generator)

    @property
    def curve(self) -> EllipticCurve:
        return self._curve

    @property
    def x(self) -> Optional[Element]:
        return self._x

    @property
    def y(self) -> Optional[Element]:
        return self._y

    @property
    def is_infinity(self) -> bool:
        return self._x is None

    def is_on_curve(self) -> bool:
        """Check the curve equation; the point at infinity always passes."""
        if self.is_infinity:
            return True
        x, y, c = self._x, self._y, self._curve
        return y * y == x * x * x + c.a * x + c.b

    def xy(self) -> tuple:
        """Return ``(x, y, is_infinity)``, with zero coordinates for infinity."""
        if self.is_infinity:
            zero = self._curve.field.zero()
            return zero, zero, True
        return self._x, self._y, False

    def double(self) -> "AffinePoint":
        """Return ``2 * self``."""
        return self + self

    def _check_same_curve(self, other: "AffinePoint") -> None:
        if other._curve != self._curve:
            raise ValueError("points lie on different curves")

    def __add__(self, other: object) -> "AffinePoint":
        if not isinstance(other, AffinePoint):
            return NotImplemented
        self._check_same_curve(other)
        if self.is_infinity:
            return other
        if other.is_infinity:
            return self
        x1, y1, x2, y2 = self._x, self._y, other._x, other._y
        if x1 == x2 and y1 == -y2:
            return AffinePoint.infinity(self._curve)
        if x1 == x2 and y1 == y2:
            slope = (3 * x1 * x1 + self._curve.a) / (2 * y1)
        else:
            slope = (y2 - y1) / (x2 - x1)
        x = slope * slope - x1 - x2
        y = slope * (x1 - x) - y1
        return AffinePoint(self._curve, x, y)

    def __neg__(self) -> "AffinePoint":
        if self.is_infinity:
            return self
        return AffinePoint._unchecked(self._curve, self._x, -self._y)

    def __sub__(self, other: object) -> "AffinePoint":
        if not isinstance(other, AffinePoint):
            return NotImplemented
        return self + -other

    def __mul__(self, scalar: object) -> "AffinePoint":
        if isinstance(scalar, Fp):
            scalar = scalar.value
        if not isinstance(scalar, int):
            return NotImplemented
        if scalar < 0:
            return -(self * -scalar)
        result = AffinePoint.infinity(self._curve)
        addend = self
        while scalar:
            if scalar & 1:
                result = result + addend
            addend = addend + addend
            scalar >>= 1
        return result

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffinePoint):
            return NotImplemented
        return (self._curve, self._x, self._y) == (other._curve, other._x, other._y)

    def __hash__(self) -> int:
        return hash((self._curve, self._x, self._y))

    def __repr__(self) -> str:
        if self.is_infinity:
            return "AffinePoint(infinity)"
        return f"AffinePoint({self._x!r}, {self._y!r})"


PLUTO_BASE_CURVE = EllipticCurve(
    field=PLUTO_BASE_FIELD, a=0, b=3, order=17, generator=(1, 2)
)

# The full 17-torsion E[17] over the quadratic extension has 17 * 17 points.
PLUTO_EXTENDED_CURVE = EllipticCurve(
    field=PLUTO_BASE_FIELD_EXTENSION,
    a=0,
    b=3,
    order=289,
    generator=(PLUTO_BASE_FIELD_EXTENSION(36, 0), PLUTO_BASE_FIELD_EXTENSION(0, 31)),
)