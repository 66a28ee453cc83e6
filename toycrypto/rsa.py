"""A tiny RSA scheme over small primes, for teaching purposes only.

The security of RSA relies on the difficulty of factoring large integers.
The primes used here are neither random nor large, so nothing here is secure.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "PrivateKey",
    "PublicKey",
    "RSA",
    "rsa_key_gen",
    "generate_e",
    "mod_inverse",
    "random_prime",
    "is_prime",
    "euler_totient",
    "gcd",
]


@dataclass(frozen=True)
class PrivateKey:
    """Key half holding the exponent ``e`` (coprime to the totient) and modulus ``n``."""

    e: int
    n: int


@dataclass(frozen=True)
class PublicKey:
    """Key half holding the exponent ``d`` (with ``d * e = 1 mod totient``) and modulus ``n``."""

    d: int
    n: int


@dataclass(frozen=True)
class RSA:
    """An RSA key pair."""

    private_key: PrivateKey
    public_key: PublicKey

    def encrypt(self, message: int) -> int:
        """Return ``message ** e mod n``."""
        return pow(message, self.private_key.e, self.private_key.n)

    def decrypt(self, cipher: int) -> int:
        """Return ``cipher ** d mod n``."""
        return pow(cipher, self.public_key.d, self.public_key.n)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``a`` and ``b``."""
    while b:
        a, b = b, a % b
    return a


def euler_totient(prime_1: int, prime_2: int) -> int:
    """Euler's totient of the product of two primes."""
    return (prime_1 - 1) * (prime_2 - 1)


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n <= 1:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def mod_inverse(e: int, totient: int) -> int:
    """Smallest positive ``d`` with ``d * e = 1 mod totient``."""
    if totient <= 1 or gcd(e, totient) != 1:
        raise ValueError(f"{e} has no inverse modulo {totient}")
    return pow(e, -1, totient)


def generate_e(p: int, q: int) -> int:
    """Smallest ``e >= 2`` coprime to the totient of ``p`` and ``q``."""
    if not (p > 1 and q > 2):
        raise ValueError("P and Q must be greater than 1")
    totient = euler_totient(p, q)
    for e in range(2, totient):
        if gcd(totient, e) == 1:
            return e
    raise ValueError("Failed to find coprime e; totient should be greater than 1")


def rsa_key_gen(p: int, q: int) -> RSA:
    """Build an RSA key pair from the primes ``p`` and ``q``."""
    if not is_prime(p):
        raise ValueError(f"{p} is not prime")
    if not is_prime(q):
        raise ValueError(f"{q} is not prime")
    n = p * q
    e = generate_e(p, q)
    d = mod_inverse(e, euler_totient(p, q))
    return RSA(private_key=PrivateKey(e=e, n=n), public_key=PublicKey(d=d, n=n))


def random_prime(first_prime: int) -> int:
    """First prime at or above 1,000,000, stopping early at ``first_prime``."""
    n = 1_000_000
    while not is_prime(n) and n != first_prime:
        n += 1
    return n