"""Reference distance kernels over float32 vectors."""

from __future__ import annotations

from typing import Any

import numpy as np

# Starting value of the running minimum in madd_and_argmin; larger values never win.
_ARGMIN_CEILING = np.float32(1e20)


def _vec(x: Any) -> np.ndarray:
    return np.ascontiguousarray(np.asarray(x, dtype=np.float32).ravel())


def _pair(x: Any, y: Any) -> tuple[np.ndarray, np.ndarray]:
    xv, yv = _vec(x), _vec(y)
    if xv.shape != yv.shape:
        raise ValueError(f"vectors differ in length: {xv.size} and {yv.size}")
    return xv, yv


def _rows(ys: Any, d: int) -> np.ndarray:
    arr = np.asarray(ys, dtype=np.float32)
    if arr.ndim == 2:
        if arr.shape[1] != d:
            raise ValueError(f"rows have {arr.shape[1]} components, expected {d}")
        return arr
    if arr.ndim != 1:
        raise ValueError("ys must be a flat buffer or a 2-D array")
    if d == 0:
        raise ValueError("cannot split a flat buffer into zero-length vectors")
    if arr.size % d:
        raise ValueError(f"buffer of {arr.size} floats is not a multiple of {d}")
    return arr.reshape(-1, d)


def l2sqr(x: Any, y: Any) -> float:
    """Squared L2 distance between two vectors."""
    xv, yv = _pair(x, y)
    diff = xv - yv
    return float(np.dot(diff, diff))


def inner_product(x: Any, y: Any) -> float:
    """Inner product of two vectors."""
    xv, yv = _pair(x, y)
    return float(np.dot(xv, yv))


def l1(x: Any, y: Any) -> float:
    """L1 distance between two vectors."""
    xv, yv = _pair(x, y)
    return float(np.abs(xv - yv).sum(dtype=np.float32))


def linf(x: Any, y: Any) -> float:
    """L-infinity distance between two vectors; NaN components are ignored."""
    xv, yv = _pair(x, y)
    return float(np.fmax.reduce(np.abs(xv - yv), initial=np.float32(0.0)))


def norm_l2sqr(x: Any) -> float:
    """Squared L2 norm of a vector, accumulated in double precision."""
    xv = _vec(x).astype(np.float64)
    return float(np.float32(np.dot(xv, xv)))


def l2sqr_ny(x: Any, ys: Any) -> np.ndarray:
    """Squared L2 distances from *x* to each vector of *ys*."""
    xv = _vec(x)
    rows = _rows(ys, xv.size)
    diff = rows - xv
    return np.einsum("ij,ij->i", diff, diff).astype(np.float32)


def inner_products_ny(x: Any, ys: Any) -> np.ndarray:
    """Inner products of *x* with each vector of *ys*."""
    xv = _vec(x)
    rows = _rows(ys, xv.size)
    return (rows @ xv).astype(np.float32)


def madd(a: Any, bf: float, b: Any) -> np.ndarray:
    """Return ``a + bf * b`` computed in float32."""
    av, bv = _pair(a, b)
    return av + np.float32(bf) * bv


def madd_and_argmin(a: Any, bf: float, b: Any) -> tuple[np.ndarray, int]:
    """Return ``c = a + bf * b`` and the index of its first minimum below 1e20, or -1."""
    c = madd(a, bf, b)
    candidates = np.flatnonzero(c < _ARGMIN_CEILING)
    if candidates.size == 0:
        return c, -1
    return c, int(candidates[np.argmin(c[candidates])])