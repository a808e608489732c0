"""
Deterministic hashing and RNG.

Every "stable but arbitrary" placement in the tracker (orbital phases,
starfield, belt scatter, mission pins) is derived from these two
functions, so the same data always reproduces the same picture.

    hash_string("Earth")        -> 32-bit FNV-1a hash
    rng = make_rng(seed)        -> callable returning floats in [0, 1)
"""

from __future__ import annotations
from typing import Callable

MASK32 = 0xFFFFFFFF

FNV_OFFSET_BASIS = 0x811C9DC5   # 2166136261
FNV_PRIME = 0x01000193          # 16777619

MULBERRY_INCREMENT = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply."""
    return (a * b) & MASK32


def hash_string(key: str) -> int:
    """FNV-1a over the UTF-8 bytes of key, as an unsigned 32-bit int."""
    h = FNV_OFFSET_BASIS
    for byte in key.encode("utf-8"):
        h ^= byte
        h = _imul(h, FNV_PRIME)
    return h


def make_rng(seed: int) -> Callable[[], float]:
    """
    Mulberry32 generator.

    Returns a zero-argument callable; each call advances a 32-bit state
    and returns the mixed value scaled to [0, 1). The same seed always
    yields the same sequence.
    """
    state = seed & MASK32

    def rng() -> float:
        nonlocal state
        state = (state + MULBERRY_INCREMENT) & MASK32
        t = _imul(state ^ (state >> 15), 1 | state)
        t = ((t + _imul(t ^ (t >> 7), 61 | t)) & MASK32) ^ t
        return ((t ^ (t >> 14)) & MASK32) / 4294967296.0

    return rng


def pair_key(*parts: str) -> str:
    """Join identifiers with the separator used for compound seeds."""
    return "|".join(parts)
