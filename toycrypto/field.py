"""Prime fields and their quadratic extensions, as used by the toy curves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from toycrypto.rsa import is_prime

__all__ = [
    "PrimeField",
    "Fp",
    "QuadraticExtension",
    "Fp2",
    "PLUTO_BASE_FIELD",
    "PLUTO_SCALAR_FIELD",
    "PLUTO_BASE_FIELD_EXTENSION",
]


@dataclass(frozen=True)
class PrimeField:
    """The field of integers modulo a prime; calling it builds elements."""

    modulus: int

    def __post_init__(self) -> None:
        if not is_prime(self.modulus):
            raise ValueError(f"modulus {self.modulus} is not prime")

    @property
    def order(self) -> int:
        """Number of elements in the field."""
        return self.modulus

    def __call__(self, value: Union[int, "Fp"]) -> "Fp":
        """Return ``value`` reduced into this field."""
        if isinstance(value, Fp):
            if value.field != self:
                raise ValueError("element belongs to a different field")
            return value
        if not isinstance(value, int):
            raise TypeError(f"cannot build a field element from {type(value).__name__}")
        return Fp(self, value)

    def zero(self) -> "Fp":
        """The additive identity."""
        return Fp(self, 0)

    def one(self) -> "Fp":
        """The multiplicative identity."""
        return Fp(self, 1)


@dataclass(frozen=True)
class Fp:
    """An element of a :class:`PrimeField`."""

    field: PrimeField
    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value % self.field.modulus)

    def _coerce(self, other: object) -> "Fp":
        if isinstance(other, Fp):
            if other.field != self.field:
                raise ValueError("elements belong to different fields")
            return other
        if isinstance(other, int):
            return Fp(self.field, other)
        return NotImplemented

    def __add__(self, other: object) -> "Fp":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Fp(self.field, self.value + other.value)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Fp":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Fp(self.field, self.value - other.value)

    def __rsub__(self, other: object) -> "Fp":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Fp(self.field, other.value - self.value)

    def __mul__(self, other: object) -> "Fp":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Fp(self.field, self.value * other.value)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Fp":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other: object) -> "Fp":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self.inverse()

    def __neg__(self) -> "Fp":
        return Fp(self.field, -self.value)

    def __pow__(self, exponent: int) -> "Fp":
        return self.pow(exponent)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"Fp({self.value} mod {self.field.modulus})"

    def inverse(self) -> "Fp":
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return Fp(self.field, pow(self.value, -1, self.field.modulus))

    def pow(self, exponent: int) -> "Fp":
        """Raise to an integer power; negative powers go through the inverse."""
        if exponent < 0:
            return self.inverse().pow(-exponent)
        return Fp(self.field, pow(self.value, exponent, self.field.modulus))

    def euler_criterion(self) -> bool:
        """True when this element is a nonzero square."""
        return self.pow((self.field.modulus - 1) // 2) == self.field.one()

    def sqrt(self) -> tuple["Fp", "Fp"]:
        """Both square roots ``(r, -r)``; raises ValueError for non-squares."""
        p = self.field.modulus
        if self.value == 0:
            return self, self
        if p == 2:
            return self, self
        if not self.euler_criterion():
            raise ValueError(f"{self!r} is not a quadratic residue")

        q, s = p - 1, 0
        while q % 2 == 0:
            q //= 2
            s += 1
        z = 2
        while pow(z, (p - 1) // 2, p) != p - 1:
            z += 1

        m, c = s, pow(z, q, p)
        t, r = pow(self.value, q, p), pow(self.value, (q + 1) // 2, p)
        while t != 1:
            i, t2 = 0, t
            while t2 != 1:
                t2 = t2 * t2 % p
                i += 1
            b = pow(c, 1 << (m - i - 1), p)
            m, c = i, b * b % p
            t, r = t * c % p, r * b % p
        root = Fp(self.field, r)
        return root, -root


@dataclass(frozen=True)
class QuadraticExtension:
    """The field ``base[t] / (t^2 - residue)`` for a non-square ``residue``."""

    base: PrimeField
    residue: Fp

    def __post_init__(self) -> None:
        residue = self.base(self.residue)
        object.__setattr__(self, "residue", residue)
        if residue.value == 0 or residue.euler_criterion():
            raise ValueError(f"t^2 - {residue.value} is reducible over the base field")

    @property
    def order(self) -> int:
        """Number of elements in the field."""
        return self.base.order ** 2

    def __call__(self, c0: Union[int, Fp], c1: Union[int, Fp] = 0) -> "Fp2":
        """Return the element ``c0 + c1 * t``."""
        return Fp2(self, self.base(c0), self.base(c1))

    def embed(self, value: Union[int, Fp, "Fp2"]) -> "Fp2":
        """Map a base-field value (or an element of this field) into the extension."""
        if isinstance(value, Fp2):
            if value.field != self:
                raise ValueError("element belongs to a different field")
            return value
        return Fp2(self, self.base(value), self.base.zero())

    def zero(self) -> "Fp2":
        """The additive identity."""
        return Fp2(self, self.base.zero(), self.base.zero())

    def one(self) -> "Fp2":
        """The multiplicative identity."""
        return Fp2(self, self.base.one(), self.base.zero())


@dataclass(frozen=True)
class Fp2:
    """An element ``c0 + c1 * t`` of a :class:`QuadraticExtension`."""

    field: QuadraticExtension
    c0: Fp
    c1: Fp

    def __post_init__(self) -> None:
        object.__setattr__(self, "c0", self.field.base(self.c0))
        object.__setattr__(self, "c1", self.field.base(self.c1))

    def _coerce(self, other: object) -> "Fp2":
        if isinstance(other, (Fp2, Fp, int)):
            return self.field.embed(other)
        return NotImplemented

    def __add__(self, other: object) -> "Fp2":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Fp2(self.field, self.c0 + other.c0, self.c1 + other.c1)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Fp2":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Fp2(self.field, self.c0 - other.c0, self.c1 - other.c1)

    def __rsub__(self, other: object) -> "Fp2":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other: object) -> "Fp2":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        r = self.field.residue
        c0 = self.c0 * other.c0 + r * self.c1 * other.c1
        c1 = self.c0 * other.c1 + self.c1 * other.c0
        return Fp2(self.field, c0, c1)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Fp2":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other: object) -> "Fp2":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self.inverse()

    def __neg__(self) -> "Fp2":
        return Fp2(self.field, -self.c0, -self.c1)

    def __pow__(self, exponent: int) -> "Fp2":
        return self.pow(exponent)

    def __repr__(self) -> str:
        return f"Fp2({self.c0.value} + {self.c1.value}*t mod {self.field.base.modulus})"

    def inverse(self) -> "Fp2":
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        if self == self.field.zero():
            raise ZeroDivisionError("zero has no inverse")
        scalar = (self.c0.pow(2) - self.field.residue * self.c1.pow(2)).inverse()
        return Fp2(self.field, self.c0 * scalar, -self.c1 * scalar)

    def pow(self, exponent: int) -> "Fp2":
        """Raise to an integer power by square-and-multiply."""
        if exponent < 0:
            return self.inverse().pow(-exponent)
        result, square = self.field.one(), self
        while exponent:
            if exponent & 1:
                result = result * square
            square = square * square
            exponent >>= 1
        return result


PLUTO_BASE_FIELD = PrimeField(101)
PLUTO_SCALAR_FIELD = PrimeField(17)
PLUTO_BASE_FIELD_EXTENSION = QuadraticExtension(PLUTO_BASE_FIELD, -2)