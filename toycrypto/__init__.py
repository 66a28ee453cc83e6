"""Readable implementations of textbook RSA, ChaCha, byte counters, prime fields, elliptic curves, the Tate pairing and ECDSA for learning."""

__version__ = "0.1.0"