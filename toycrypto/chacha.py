"""The ChaCha stream cipher, in its original and IETF (RFC 8439) variants.

The original variant uses a 64-bit nonce and a 64-bit counter (two words
each); the IETF variant uses a 96-bit nonce and a 32-bit counter.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import MutableSequence, Sequence

__all__ = [
    "STATE_WORDS",
    "STATE_CONSTS",
    "WordCounter",
    "ChaCha",
    "block",
    "quarter_round",
]

STATE_WORDS = 16
STATE_CONSTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)
_MASK32 = 0xFFFFFFFF
_BLOCK_BYTES = 64


def _check_words(words: Sequence[int], what: str) -> None:
    if any(not 0 <= w <= _MASK32 for w in words):
        raise ValueError(f"{what} words must be 32-bit unsigned integers")


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


@dataclass
class WordCounter:
    """Big-endian counter made of 32-bit words."""

    value: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.value = list(self.value)
        _check_words(self.value, "counter")

    def increment(self) -> None:
        """Add one to the counter, raising OverflowError at its maximum."""
        if not self.value:
            raise ValueError("counter value is 0")
        if all(w == _MASK32 for w in self.value):
            raise OverflowError("max counter reached")
        total = 0
        for word in self.value:
            total = (total << 32) | word
        total += 1
        width = len(self.value)
        self.value = [(total >> (32 * k)) & _MASK32 for k in reversed(range(width))]


def quarter_round(a: int, b: int, c: int, d: int, state: MutableSequence[int]) -> None:
    """Scramble four words of ``state`` in place with add-rotate-xor steps."""
    state[a] = (state[a] + state[b]) & _MASK32
    state[d] = _rotl(state[d] ^ state[a], 16)

    state[c] = (state[c] + state[d]) & _MASK32
    state[b] = _rotl(state[b] ^ state[c], 12)

    state[a] = (state[a] + state[b]) & _MASK32
    state[d] = _rotl(state[d] ^ state[a], 8)

    state[c] = (state[c] + state[d]) & _MASK32
    state[b] = _rotl(state[b] ^ state[c], 7)


def _column_rounds(state: MutableSequence[int]) -> None:
    quarter_round(0, 4, 8, 12, state)
    quarter_round(1, 5, 9, 13, state)
    quarter_round(2, 6, 10, 14, state)
    quarter_round(3, 7, 11, 15, state)


def _diagonal_rounds(state: MutableSequence[int]) -> None:
    quarter_round(0, 5, 10, 15, state)
    quarter_round(1, 6, 11, 12, state)
    quarter_round(2, 7, 8, 13, state)
    quarter_round(3, 4, 9, 14, state)


def block(
    key: Sequence[int], counter: WordCounter, nonce: Sequence[int], rounds: int
) -> bytes:
    """Compute one 64-byte keystream block."""
    state = [*STATE_CONSTS, *key, *counter.value, *nonce]
    if len(state) != STATE_WORDS:
        raise ValueError(f"expected a state of {STATE_WORDS} words but got {len(state)}")
    working = list(state)
    for _ in range(rounds // 2):
        _column_rounds(working)
        _diagonal_rounds(working)
    mixed = [(a + b) & _MASK32 for a, b in zip(state, working)]
    return struct.pack("<16I", *mixed)


def _xor(data: bytes, keystream: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(data, keystream))


class ChaCha:
    """ChaCha stream cipher with a 256-bit key given as eight 32-bit words."""

    def __init__(self, key: Sequence[int], nonce: Sequence[int], rounds: int = 20) -> None:
        if len(key) != 8:
            raise ValueError(f"key must be 8 words, got {len(key)}")
        _check_words(key, "key")
        _check_words(nonce, "nonce")
        self.key = tuple(key)
        self.nonce = tuple(nonce)
        self.rounds = rounds

    def encrypt(self, plaintext: bytes, counter: WordCounter | None = None) -> bytes:
        """XOR ``plaintext`` with the keystream starting at ``counter`` (zero by default)."""
        if counter is None:
            counter = WordCounter([0] * max(0, 4 - len(self.nonce)))
        if len(counter.value) + len(self.nonce) != 4:
            raise ValueError("invalid counter and nonce lengths")

        current = WordCounter(counter.value)
        data = bytes(plaintext)
        full = len(data) - len(data) % _BLOCK_BYTES
        out = bytearray()

        for start in range(0, full, _BLOCK_BYTES):
            keystream = block(self.key, current, self.nonce, self.rounds)
            current.increment()
            out += _xor(data[start : start + _BLOCK_BYTES], keystream)

        remainder = data[full:]
        if remainder:
            keystream = block(self.key, current, self.nonce, self.rounds)
            out += _xor(remainder, keystream)

        return bytes(out)

    def decrypt(self, ciphertext: bytes, counter: WordCounter | None = None) -> bytes:
        """Invert :meth:`encrypt`; the operation is its own inverse."""
        return self.encrypt(ciphertext, counter)