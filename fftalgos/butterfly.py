"""
Radix-2 decimation-in-time butterfly stage.

Both engines work in place on a buffer whose samples are already in
bit-reversed order (forward) and leave the inverse result in bit-reversed
order; the permutation itself lives in :mod:`fftalgos.bitrev`.

``cache`` is a :class:`~fftalgos.twiddle.TwiddleCache` built for
``len(buf)``, or ``None`` to evaluate the twiddles on the fly. Nothing here
validates its arguments: the transform API does that before calling in.
"""

from typing import Optional

import numpy as np

from .config import resolve_engine
from .twiddle import TwiddleCache, compute_twiddles


def _stage_twiddles(cache: Optional[TwiddleCache], m: int) -> np.ndarray:
    if cache is None:
        return compute_twiddles(m)
    return cache.stride_for(m)


# ---------------- iterative (default) ---------------- #

def _forward_iterative(buf: np.ndarray, cache: Optional[TwiddleCache]) -> None:
    n = len(buf)
    m = 2
    while m <= n:
        half = m // 2
        w = _stage_twiddles(cache, m)
        blocks = buf.reshape(-1, m)  # view: every length-m group of this level

        u = blocks[:, :half].copy()  # copy: the first half is overwritten below
        t = blocks[:, half:] * w

        blocks[:, :half] = u + t
        blocks[:, half:] = u - t
        m <<= 1


def _inverse_iterative(buf: np.ndarray, cache: Optional[TwiddleCache]) -> None:
    m = len(buf)
    while m >= 2:
        half = m // 2
        w = _stage_twiddles(cache, m)
        blocks = buf.reshape(-1, m)

        q = (blocks[:, :half] - blocks[:, half:]) / 2
        blocks[:, :half] -= q
        blocks[:, half:] = q / w
        m >>= 1


# ---------------- recursive ---------------- #

def _forward_recursive(buf: np.ndarray, cache: Optional[TwiddleCache]) -> None:
    n = len(buf)
    if n == 1:
        return
    half = n // 2
    _forward_recursive(buf[:half], cache)
    _forward_recursive(buf[half:], cache)

    u = _stage_twiddles(cache, n)
    p = buf[:half].copy()
    q = u * buf[half:]
    buf[:half] = p + q
    buf[half:] = p - q


def _inverse_recursive(buf: np.ndarray, cache: Optional[TwiddleCache]) -> None:
    n = len(buf)
    if n == 1:
        return
    half = n // 2

    u = _stage_twiddles(cache, n)
    q = (buf[:half] - buf[half:]) / 2
    buf[:half] -= q
    buf[half:] = q / u

    _inverse_recursive(buf[:half], cache)
    _inverse_recursive(buf[half:], cache)


# ---------------- dispatch ---------------- #

def forward_combine(buf: np.ndarray, cache: Optional[TwiddleCache] = None, engine: Optional[str] = None) -> None:
    """Turn bit-reversed samples in *buf* into their DFT, in place."""
    if resolve_engine(engine) == "recursive":
        _forward_recursive(buf, cache)
    else:
        _forward_iterative(buf, cache)


def inverse_combine(buf: np.ndarray, cache: Optional[TwiddleCache] = None, engine: Optional[str] = None) -> None:
    """Undo :func:`forward_combine`: spectrum in, bit-reversed samples out.

    Each level halves its pair difference, so the ``1/n`` normalisation is
    spread over the ``log2(n)`` levels and no final scaling pass is needed.
    """
    if resolve_engine(engine) == "recursive":
        _inverse_recursive(buf, cache)
    else:
        _inverse_iterative(buf, cache)
