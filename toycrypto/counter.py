"""Increment-by-one counter made of big-endian byte limbs, used by block cipher modes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

__all__ = ["CounterError", "Counter"]


class CounterError(ValueError):
    """Raised when a counter cannot be incremented."""


@dataclass
class Counter:
    """A big-endian integer of fixed width held as bytes."""

    value: bytes

    def __init__(self, value: Iterable[int]) -> None:
        self.value = bytes(value)

    def increment(self) -> None:
        """Add one; raise :class:`CounterError` if empty or already at its maximum."""
        width = len(self.value)
        if width == 0:
            raise CounterError("counter value is 0")
        if all(b == 0xFF for b in self.value):
            raise CounterError("max counter reached")
        number = int.from_bytes(self.value, "big") + 1
        self.value = number.to_bytes(width, "big")

    @classmethod
    def from_int(cls, value: int, length: int) -> Counter:
        """Fill ``length`` limbs from the leading bytes of ``value``'s 8-byte big-endian form."""
        if not 0 <= value < 1 << 64:
            raise ValueError(f"value {value} does not fit in 64 bits")
        if length < 0:
            raise ValueError("length must not be negative")
        word = value.to_bytes(8, "big")
        taken = word[: min(length, 8)]
        return cls(taken + bytes(length - len(taken)))