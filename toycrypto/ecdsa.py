"""ECDSA signing and verification over a curve with a prime-order generator."""

from __future__ import annotations

import hashlib
import secrets
from typing import Tuple, Union

from toycrypto.curve import PLUTO_BASE_CURVE, AffinePoint, EllipticCurve
from toycrypto.field import Fp, PrimeField

__all__ = ["sign", "verify"]

Scalar = Union[int, Fp]


def _hash_to_scalar(message: bytes, field: PrimeField) -> Fp:
    """Leftmost ``bit_length(n)`` bits of SHA-256 of ``message``, as a scalar."""
    digest = int.from_bytes(hashlib.sha256(bytes(message)).digest(), "big")
    bits = field.modulus.bit_length()
    return field(digest >> (256 - bits))


def _x_to_scalar(point: AffinePoint, field: PrimeField) -> Fp:
    x, _, is_infinity = point.xy()
    return field(0 if is_infinity else int(x))


def sign(
    message: bytes, private_key: Scalar, curve: EllipticCurve = PLUTO_BASE_CURVE
) -> Tuple[Fp, Fp]:
    """Sign ``message`` with ``private_key``; returns ``(r, s)`` in the scalar field.

    The curve must be over a prime field, with a generator of prime order.
    """
    scalars = PrimeField(curve.order)
    n = curve.order
    key = scalars(int(private_key))
    z = _hash_to_scalar(message, scalars)
    generator = AffinePoint.generator(curve)

    while True:
        k = scalars(secrets.randbelow(n - 1) + 1)
        r = _x_to_scalar(generator * k, scalars)
        if r.value == 0:
            continue
        s = k.inverse() * (z + r * key)
        if s.value == 0:
            continue
        return r, s


def verify(
    message: bytes,
    public_key: AffinePoint,
    signature: Tuple[Scalar, Scalar],
    curve: EllipticCurve = PLUTO_BASE_CURVE,
) -> bool:
    """Check an ECDSA ``signature`` on ``message`` against ``public_key``.

    Raises ValueError when ``u1 * G + u2 * Q`` is the point at infinity.
    """
    scalars = PrimeField(curve.order)
    if not (public_key * curve.order).is_infinity:
        return False

    r, s = (scalars(int(v)) for v in signature)
    if r.value == 0 or s.value == 0:
        return False

    z = _hash_to_scalar(message, scalars)
    s_inv = s.inverse()
    u_1 = z * s_inv
    u_2 = r * s_inv
    point = AffinePoint.generator(curve) * u_1 + public_key * u_2
    if point.is_infinity:
        raise ValueError("signature invalid")
    return r == _x_to_scalar(point, scalars)