"""Tate pairing on supersingular curves, computed with Miller's algorithm."""

from __future__ import annotations

from toycrypto.curve import AffinePoint

__all__ = [
    "pairing",
    "miller_loop",
    "line_function",
    "vertical_line",
    "tangent_line",
]


def _coordinates(point: AffinePoint):
    if point.is_infinity:
        raise ValueError("Cannot use point at infinity")
    return point.x, point.y


def line_function(a: AffinePoint, b: AffinePoint, point: AffinePoint):
    """Evaluate the line through ``a`` and ``b`` at ``point``.

    The line is the secant when the x-coordinates differ, the tangent when
    ``a == b``, and the vertical line otherwise. Raises ValueError if any
    argument is the point at infinity.
    """
    a_x, a_y = _coordinates(a)
    b_x, b_y = _coordinates(b)
    x, y = _coordinates(point)

    if a_x != b_x:
        slope = (b_y - a_y) / (b_x - a_x)
        return slope * (x - a_x) + a_y - y
    if a_y == b_y:
        slope = (3 * a_x.pow(2) + a.curve.a) / (2 * a_y)
        return slope * (x - a_x) + a_y - y
    return x - a_x


def vertical_line(a: AffinePoint, point: AffinePoint):
    """Evaluate the vertical line through ``a`` at ``point``."""
    return line_function(a, -a, point)


def tangent_line(a: AffinePoint, point: AffinePoint):
    """Evaluate the tangent line at ``a`` at ``point``."""
    return line_function(a, a, point)


def miller_loop(p: AffinePoint, q: AffinePoint, r: int):
    """Evaluate the rational function ``f_{r,P}`` at ``Q`` by double-and-add."""
    if r < 1:
        raise ValueError("r must be a positive integer")
    value = p.curve.field.one()
    z = p
    for bit in bin(r)[3:]:
        value = value.pow(2) * tangent_line(z, q) / vertical_line(2 * z, q)
        z = z + z
        if bit == "1":
            if (z + p).is_infinity:
                value = value * line_function(z, p, q)
            else:
                value = value * line_function(z, p, q) / vertical_line(z + p, q)
            z = z + p
    return value


def _check_torsion(point: AffinePoint, r: int) -> None:
    if not (point * r).is_infinity:
        raise ValueError(f"{point!r} is not an {r}-torsion point")


def pairing(p: AffinePoint, q: AffinePoint, r: int):
    """Reduced Tate pairing of two ``r``-torsion points, an ``r``-th root of unity.

    Raises ValueError if either point is not in the ``r``-torsion.
    """
    _check_torsion(p, r)
    _check_torsion(q, r)
    value = miller_loop(p, q, r)
    return value.pow((p.curve.field.order - 1) // r)