import pytest

from toycrypto.rsa import (
    RSA,
    euler_totient,
    gcd,
    generate_e,
    is_prime,
    mod_inverse,
    random_prime,
    rsa_key_gen,
)

PRIME_1 = 5
PRIME_2 = 3
PRIME_3 = 7

PAIRS = [(PRIME_1, PRIME_2), (PRIME_2, PRIME_3), (PRIME_3, PRIME_1)]


def test_euler_totient():
    assert euler_totient(PRIME_1, PRIME_2) == 8
    assert euler_totient(PRIME_2, PRIME_3) == 12
    assert euler_totient(PRIME_3, PRIME_1) == 24


@pytest.mark.parametrize("p,q", PAIRS)
def test_key_gen(p, q):
    key = rsa_key_gen(p, q)
    assert isinstance(key, RSA)
    assert key.public_key.n == p * q
    assert key.private_key.n == p * q
    assert gcd(key.private_key.e, euler_totient(p, q)) == 1


def test_non_prime_key_gen():
    with pytest.raises(ValueError):
        rsa_key_gen(100, 200)


def test_gcd():
    assert gcd(10, 5) == 5
    assert gcd(10, 3) == 1


def test_generate_e():
    assert generate_e(PRIME_1, PRIME_2) == 3
    assert generate_e(PRIME_2, PRIME_3) == 5
    assert generate_e(PRIME_3, PRIME_1) == 5


def test_generate_e_rejects_small_inputs():
    with pytest.raises(ValueError):
        generate_e(1, 5)


def test_mod_inverse():
    assert mod_inverse(3, 8) == 3
    assert mod_inverse(5, 12) == 5
    assert mod_inverse(5, 24) == 5


def test_mod_inverse_without_inverse():
    with pytest.raises(ValueError):
        mod_inverse(2, 8)


@pytest.mark.parametrize("p,q", PAIRS)
def test_encrypt_decrypt(p, q):
    message = 10
    key = rsa_key_gen(p, q)
    cipher = key.encrypt(message)
    assert key.decrypt(cipher) == message


def test_key_exponents_are_inverse():
    key = rsa_key_gen(PRIME_3, PRIME_1)
    assert (key.private_key.e * key.public_key.d) % euler_totient(PRIME_3, PRIME_1) == 1


def test_random_prime():
    prime = random_prime(2)
    assert is_prime(prime)
    assert prime >= 1_000_000
    assert prime == 1_000_003


def test_random_prime_stops_at_first_prime():
    assert random_prime(1_000_001) == 1_000_001


@pytest.mark.parametrize("n,expected", [(0, False), (1, False), (2, True), (9, False), (97, True)])
def test_is_prime(n, expected):
    assert is_prime(n) is expected