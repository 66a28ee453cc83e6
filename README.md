# toycrypto

Small, readable implementations of cryptographic building blocks. The code is
written to be studied, not deployed: the parameters are tiny, the algorithms
are straightforward, and nothing is hardened against side channels. Do not
protect real data with it.

The package has no dependencies beyond the Python standard library.

## What is inside

- `toycrypto.rsa`: textbook RSA with small primes. `rsa_key_gen(p, q)` returns
  an `RSA` key pair (holding a `PrivateKey` and a `PublicKey`) with
  `encrypt` and `decrypt`; the helpers `generate_e`, `mod_inverse`,
  `is_prime`, `gcd`, `euler_totient` and `random_prime` are public too.
  Invalid input (a non-prime, a value with no inverse) raises `ValueError`.
- `toycrypto.chacha`: the ChaCha stream cipher in its original variant (two
  nonce words, two counter words) and its RFC 8439 variant (three nonce
  words, one counter word). `ChaCha(key, nonce, rounds=20)` takes the key as
  eight 32-bit words; `WordCounter` is the big-endian word counter, and
  `block` and `quarter_round` expose the core function. A counter that runs
  past its maximum raises `OverflowError`.
- `toycrypto.counter`: `Counter`, a fixed-width big-endian counter held as
  bytes, with `increment()` and `Counter.from_int(value, length)`. An empty
  counter or one at its maximum raises `CounterError`.
- `toycrypto.field`: prime fields (`PrimeField`, elements `Fp`) and quadratic
  extensions `base[t] / (t^2 - residue)` (`QuadraticExtension`, elements
  `Fp2`), with inverses, powers, Euler's criterion and square roots in the
  prime field. Ready-made fields: `PLUTO_BASE_FIELD` (GF(101)),
  `PLUTO_SCALAR_FIELD` (GF(17)) and `PLUTO_BASE_FIELD_EXTENSION`
  (GF(101) with `t^2 = -2`).
- `toycrypto.curve`: short Weierstrass curves `y^2 = x^3 + ax + b`
  (`EllipticCurve`) and their affine points (`AffinePoint`) with addition,
  negation, subtraction, doubling and multiplication by integers or field
  elements. `PLUTO_BASE_CURVE` is `y^2 = x^3 + 3` over GF(101) with the
  generator `(1, 2)` of order 17; `PLUTO_EXTENDED_CURVE` is the same equation
  over the quadratic extension.
- `toycrypto.pairing`: the reduced Tate pairing `pairing(p, q, r)` of two
  `r`-torsion points, computed with `miller_loop`, plus the line functions
  `line_function`, `tangent_line` and `vertical_line`.
- `toycrypto.ecdsa`: `sign(message, private_key, curve)` and
  `verify(message, public_key, signature, curve)`, over `PLUTO_BASE_CURVE`
  by default. The message digest is SHA-256, cut down to the bit length of
  the group order.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Examples

Textbook RSA with very small primes:

```python
from toycrypto.rsa import rsa_key_gen

keys = rsa_key_gen(5, 3)
assert keys.private_key.n == 15
assert keys.decrypt(keys.encrypt(10)) == 10
```

ChaCha20 as specified in RFC 8439, with a three-word nonce and a one-word
counter:

```python
from toycrypto.chacha import ChaCha, WordCounter, block

key = [0] * 8
nonce = [0, 0, 0]
assert block(key, WordCounter([0]), nonce, 20)[:4].hex() == "76b8e0ad"

chacha = ChaCha(key, nonce, rounds=20)
ciphertext = chacha.encrypt(b"Hello World!", WordCounter([0]))
assert chacha.decrypt(ciphertext, WordCounter([0])) == b"Hello World!"
```

A byte counter carries into the next limb:

```python
from toycrypto.counter import Counter

counter = Counter([0x00, 0x00, 0xFF])
counter.increment()
assert counter.value == b"\x00\x01\x00"
```

Points on the small curve `y^2 = x^3 + 3` over GF(101):

```python
from toycrypto.curve import PLUTO_BASE_CURVE, AffinePoint

g = AffinePoint.generator(PLUTO_BASE_CURVE)
assert g.double() == AffinePoint(PLUTO_BASE_CURVE, 68, 74)
assert (3 * g) == AffinePoint(PLUTO_BASE_CURVE, 26, 45)
assert (g * 17).is_infinity
```

Signing and verifying with ECDSA on that curve:

```python
from toycrypto.curve import PLUTO_BASE_CURVE, AffinePoint
from toycrypto.ecdsa import sign, verify

private_scalar = 7
public_point = AffinePoint.generator(PLUTO_BASE_CURVE) * private_scalar
signature = sign(b"Hello, world!", private_scalar)
assert verify(b"Hello, world!", public_point, signature)
```

## What the package does not do

There are no block ciphers in the package, and no block cipher modes of
operation: `Counter` is provided on its own, ready for a counter mode, but
nothing here encrypts fixed-size blocks. Symmetric encryption is available
only through the ChaCha stream cipher. There is no command-line tool; the
package is used as a library.

## Caveats

Every primitive here follows its textbook description so that the code is easy
to read next to the description. The RSA keys and the elliptic curves are far
too small to give any security, and with a group of order 17 an ECDSA
signature can be forged by trying every value. Use the package to learn how
the algorithms work, and use a vetted library for anything else.