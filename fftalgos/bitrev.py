"""
Bit-reversal permutation.

The decimation-in-time butterflies expect their input in bit-reversed index
order, and the inverse butterflies leave their output in that order. The
permutation is its own inverse, so the same routine serves both directions.
"""

from typing import Optional, Tuple

import numpy as np

from ._checks import check_signal, check_size, resolve_size

MAX_BITS = 32


# ---------------- helpers ---------------- #

def bit_reverse_indices(n: int) -> np.ndarray:
    """Bit-reversal permutation for power-of-two *n* (vectorised, 32-bit).

    Entry ``i`` of the result is ``i`` with its lowest ``log2(n)`` bits
    written in reverse order.
    """
    n = check_size(n)
    bits = n.bit_length() - 1
    if bits > MAX_BITS:
        raise ValueError(f"Bit reversal supports at most 2**{MAX_BITS} samples, got {n}.")
    if bits == 0:
        return np.zeros(1, dtype=np.intp)
    rev = np.arange(n, dtype=np.uint32)
    rev = ((rev & 0x55555555) << 1) | ((rev & 0xAAAAAAAA) >> 1)
    rev = ((rev & 0x33333333) << 2) | ((rev & 0xCCCCCCCC) >> 2)
    rev = ((rev & 0x0F0F0F0F) << 4) | ((rev & 0xF0F0F0F0) >> 4)
    rev = ((rev & 0x00FF00FF) << 8) | ((rev & 0xFF00FF00) >> 8)
    rev = (rev << 16) | (rev >> 16)
    rev >>= MAX_BITS - bits
    return rev.astype(np.intp)


def swap_pairs(n: int) -> Tuple[np.ndarray, np.ndarray]:
    """Index pairs ``(rev(i), i)`` with ``rev(i) < i``: every swap exactly once.

    Fixed points (0, n-1, palindromes) never appear. The arrays are
    read-only; the caller owns them.
    """
    idx = np.arange(n, dtype=np.intp)
    rev = bit_reverse_indices(n)
    mask = rev < idx
    lo, hi = rev[mask], idx[mask]
    lo.flags.writeable = False
    hi.flags.writeable = False
    return lo, hi


def permute(view: np.ndarray, pairs: Optional[Tuple[np.ndarray, np.ndarray]] = None) -> None:
    """Swap ``view[i]`` and ``view[rev(i)]`` in place. No argument checks.

    *pairs* are precomputed :func:`swap_pairs` for ``len(view)``; without
    them the pairs are built for this call only.
    """
    lo, hi = swap_pairs(len(view)) if pairs is None else pairs
    if lo.size:
        view[lo], view[hi] = view[hi], view[lo]


# ---------------- public entry point ---------------- #

def bit_reverse_permute(buf: np.ndarray, n: Optional[int] = None) -> np.ndarray:
    """Reorder the first *n* samples of *buf* into bit-reversed order, in place.

    Parameters
    ----------
    buf : ndarray of complex64
        One-dimensional, writable, C-contiguous buffer.
    n : int, optional
        Number of samples to permute (a power of two). Defaults to ``len(buf)``.

    Returns
    -------
    ndarray
        *buf* itself.
    """
    n = resolve_size(n, buf)
    permute(check_signal(buf, n))
    return buf
