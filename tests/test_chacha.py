import random

import pytest

from toycrypto.chacha import ChaCha, WordCounter, block, quarter_round

MAX = 0xFFFFFFFF

RFC_KEY = [
    0x03020100,
    0x07060504,
    0x0B0A0908,
    0x0F0E0D0C,
    0x13121110,
    0x17161514,
    0x1B1A1918,
    0x1F1E1D1C,
]


def test_quarter_round():
    state = [
        0x879531E0, 0xC5ECF37D, 0x516461B1, 0xC9A62F8A,
        0x44C20EF3, 0x3390AF7F, 0xD9FC690B, 0x2A5F714C,
        0x53372767, 0xB00A5631, 0x974C541A, 0x359E9963,
        0x5C971061, 0x3D631689, 0x2098D9D6, 0x91DBD320,
    ]
    quarter_round(2, 7, 8, 13, state)
    assert state == [
        0x879531E0, 0xC5ECF37D, 0xBDB886DC, 0xC9A62F8A,
        0x44C20EF3, 0x3390AF7F, 0xD9FC690B, 0xCFACAFD2,
        0xE46BEA80, 0xB00A5631, 0x974C541A, 0x359E9963,
        0x5C971061, 0xCCC07C79, 0x2098D9D6, 0x91DBD320,
    ]


def test_chacha_block():
    nonce = [0x09000000, 0x4A000000, 0]
    state = block(RFC_KEY, WordCounter([1]), nonce, 20)
    assert state == bytes.fromhex(
        "10f1e7e4d13b5915500fdd1fa32071c4"
        "c7d1f4c733c068030422aa9ac3d46c4e"
        "d2826446079faa0914c2d705d98b02a2"
        "b5129cd1de164eb9cbd083e8a2503c4e"
    )


BLOCK_ZERO = bytes.fromhex(
    "76b8e0ada0f13d90405d6ae55386bd28"
    "bdd219b8a08ded1aa836efcc8b770dc7"
    "da41597c5157488d7724e03fb8d84a37"
    "6a43b8f41518a11cc387b669b2ee6586"
)


def test_chacha_block_2():
    state = block([0] * 8, WordCounter([0]), [0, 0, 0], 20)
    assert state == BLOCK_ZERO


def test_block_rejects_wrong_state_size():
    with pytest.raises(ValueError):
        block([0] * 8, WordCounter([0]), [0, 0], 20)


PLAINTEXT = (
    b"Ladies and Gentlemen of the class of '99: If I could offer you only one tip "
    b"for the future, sunscreen would be it."
)

CIPHERTEXT = bytes.fromhex(
    "6e2e359a2568f98041ba0728dd0d6981"
    "e97e7aec1d4360c20a27afccfd9fae0b"
    "f91b65c5524733ab8f593dabcd62b357"
    "1639d624e65152ab8f530c359f0861d8"
    "07ca0dbf500d6a6156a38e088a22b65e"
    "52bc514d16ccf806818ce91ab7793736"
    "5af90bbf74a35be6b40b8eedf2785e42"
    "874d"
)


def test_chacha_encrypt():
    chacha = ChaCha(RFC_KEY, [0, 0x4A000000, 0], 20)
    counter = WordCounter([1])
    ciphertext = chacha.encrypt(PLAINTEXT, counter)
    assert ciphertext == CIPHERTEXT
    assert chacha.decrypt(ciphertext, counter) == PLAINTEXT


def test_encrypt_does_not_change_callers_counter():
    chacha = ChaCha(RFC_KEY, [0, 0x4A000000, 0])
    counter = WordCounter([1])
    chacha.encrypt(PLAINTEXT, counter)
    assert counter.value == [1]


@pytest.mark.parametrize(
    "start,expected",
    [([0, 10], [0, 11]), ([1, MAX], [2, 0])],
)
def test_counter(start, expected):
    counter = WordCounter(start)
    counter.increment()
    assert counter.value == expected


def test_counter_at_max():
    counter = WordCounter([MAX, MAX, MAX])
    with pytest.raises(OverflowError):
        counter.increment()


def test_empty_counter():
    with pytest.raises(ValueError):
        WordCounter([]).increment()


def test_default_counter_is_zero():
    chacha = ChaCha([0] * 8, [0, 0, 0])
    assert chacha.encrypt(bytes(64)) == BLOCK_ZERO
    assert chacha.encrypt(bytes(64)) == chacha.encrypt(bytes(64), WordCounter([0]))


def test_invalid_counter_and_nonce_lengths():
    chacha = ChaCha([0] * 8, [0, 0])
    with pytest.raises(ValueError):
        chacha.encrypt(b"data", WordCounter([0]))


def test_counter_overflow_during_encrypt():
    chacha = ChaCha([0] * 8, [0, 0, 0])
    with pytest.raises(OverflowError):
        chacha.encrypt(bytes(64), WordCounter([MAX]))


def test_invalid_key_length():
    with pytest.raises(ValueError):
        ChaCha([0] * 7, [0, 0, 0])


@pytest.mark.parametrize("rounds", [20, 12, 8])
@pytest.mark.parametrize("nonce_len", [2, 3])
def test_round_trip(rounds, nonce_len):
    rng = random.Random(rounds * 10 + nonce_len)
    key = [rng.getrandbits(32) for _ in range(8)]
    nonce = [rng.getrandbits(32) for _ in range(nonce_len)]
    counter = WordCounter([0] * (4 - nonce_len))
    plaintext = bytes(rng.getrandbits(8) for _ in range(200))

    chacha = ChaCha(key, nonce, rounds)
    ciphertext = chacha.encrypt(plaintext, counter)
    assert len(ciphertext) == len(plaintext)
    assert ciphertext != plaintext
    assert chacha.decrypt(ciphertext, counter) == plaintext


def test_round_counts_give_different_keystreams():
    key = list(range(8))
    nonce = [1, 2, 3]
    out = {ChaCha(key, nonce, r).encrypt(bytes(32)) for r in (8, 12, 20)}
    assert len(out) == 3