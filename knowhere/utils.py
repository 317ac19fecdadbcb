"""Vector hashing and alignment helpers."""

from __future__ import annotations

from typing import Iterable

import numpy as np

SEED = 0xC70F6907
_MASK64 = (1 << 64) - 1
_MULTIPLIER = 13331


def _fold(values: Iterable[int]) -> int:
    h = SEED
    for v in values:
        h = (h * _MULTIPLIER + int(v)) & _MASK64
    return h


def hash_vec(x: Iterable[float]) -> int:
    """64-bit hash of a float vector over the bit patterns of its float32 components."""
    bits = np.ascontiguousarray(np.asarray(x, dtype=np.float32).ravel()).view(np.uint32)
    return _fold(bits.tolist())


def hash_binary_vec(x: bytes | bytearray | memoryview, dim: int) -> int:
    """64-bit hash of the bytes holding the first *dim* bits of a binary vector."""
    length = (dim + 7) // 8
    data = bytes(x)
    if len(data) < length:
        raise ValueError(f"binary vector of {len(data)} bytes is shorter than {dim} bits")
    return _fold(data[:length])


def round_down(value: int, align: int) -> int:
    """Round *value* towards zero to a multiple of *align*."""
    if align == 0:
        raise ZeroDivisionError("align must not be zero")
    quotient = abs(value) // abs(align)
    if (value < 0) != (align < 0):
        quotient = -quotient
    return quotient * align