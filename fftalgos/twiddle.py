"""
Twiddle factors and the reusable twiddle cache.

A transform of length ``n`` needs the ``n/2`` rotations
``w_k = exp(-2*pi*i*k/n)``. Every shorter sub-transform of length ``m`` uses
the same values at stride ``n/m``, so one table built for the full length
serves every level of the butterfly stage.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from ._checks import check_size
from .bitrev import swap_pairs
from .config import COMPLEX_DTYPE
from .errors import BufferTooSmallError, ClosedCacheError, SizeMismatchError

logger = logging.getLogger(__name__)


def compute_twiddles(m: int) -> np.ndarray:
    """Return the ``m/2`` forward twiddles of a length-*m* butterfly as complex64."""
    k = np.arange(m // 2)
    return np.exp(-2j * np.pi * k / m).astype(COMPLEX_DTYPE)


def fill_twiddles(n: int, out: np.ndarray) -> np.ndarray:
    """Write the twiddle table for length *n* into the caller-provided *out*.

    *out* must be a writable one-dimensional complex64 array holding exactly
    ``n // 2`` elements.
    """
    n = check_size(n)
    if not isinstance(out, np.ndarray):
        raise TypeError(f"Twiddle table must be a numpy.ndarray, got {type(out).__name__}.")
    if out.dtype != COMPLEX_DTYPE:
        raise TypeError(f"Twiddle table must have dtype complex64, got {out.dtype}.")
    if out.ndim != 1:
        raise ValueError(f"Twiddle table must be one-dimensional, got shape {out.shape}.")
    half = n // 2
    if len(out) < half:
        raise BufferTooSmallError("lut", half, len(out))
    if len(out) > half:
        raise SizeMismatchError(2 * len(out), n)
    out[:] = compute_twiddles(n)
    return out


class TwiddleCache:
    """Precomputed twiddle factors for repeated transforms of one length.

    Besides the ``n/2`` twiddles the cache keeps the bit-reversal swap pairs
    for length ``n``, so a cached transform does no index or trigonometric
    set-up work. Both are read-only once built, and one cache may be shared by
    any number of transforms of length ``n``. Release it with :meth:`close`
    (or :func:`cache_destroy`, or a ``with`` block); that drops every array
    the cache holds, and a closed cache raises :class:`ClosedCacheError`
    when used.

    Parameters
    ----------
    n : int
        Transform length, a power of two.
    lut : ndarray of complex64, optional
        Caller-owned storage of exactly ``n // 2`` elements. It is filled in
        place and adopted, not copied: the cache clears the ``writeable``
        flag of the array it was given, but the caller still owns that memory
        (and any base array it is a view of). Writing to it through another
        view, or setting ``writeable`` back, changes the table every later
        transform uses.
    """

    def __init__(self, n: int, lut: Optional[np.ndarray] = None):
        self.n = check_size(n)
        table = compute_twiddles(self.n) if lut is None else fill_twiddles(self.n, lut)
        table.flags.writeable = False
        self._lut = table
        self._pairs = swap_pairs(self.n)
        nbytes = table.nbytes + sum(a.nbytes for a in self._pairs)
        logger.debug(f"Created twiddle cache for n = {self.n} ({nbytes} bytes)")

    @property
    def closed(self) -> bool:
        return self._lut is None

    def _closed_error(self) -> ClosedCacheError:
        return ClosedCacheError(f"Twiddle cache for n = {self.n} has been destroyed.")

    @property
    def lut(self) -> np.ndarray:
        """The read-only table ``lut[k] = exp(-2*pi*i*k/n)``, ``k < n/2``."""
        if self._lut is None:
            raise self._closed_error()
        return self._lut

    @property
    def swap_pairs(self) -> Tuple[np.ndarray, np.ndarray]:
        """Bit-reversal swap pairs for length ``n`` (see :func:`fftalgos.bitrev.swap_pairs`)."""
        if self._pairs is None:
            raise self._closed_error()
        return self._pairs

    def require(self, n: int) -> np.ndarray:
        """Return the table, checking that it was built for length *n*."""
        lut = self.lut
        if n != self.n:
            raise SizeMismatchError(self.n, n)
        return lut

    def stride_for(self, m: int) -> np.ndarray:
        """Twiddles of a length-*m* sub-transform: every ``(n/m)``-th entry."""
        m = check_size(m)
        if m > self.n:
            raise SizeMismatchError(self.n, m)
        if m == 1:
            return self.lut[:0]
        return self.lut[:: self.n // m]

    def close(self) -> None:
        if self._lut is not None:
            logger.debug(f"Destroyed twiddle cache for n = {self.n}")
            self._lut = None
            self._pairs = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self):
        state = "closed" if self.closed else "open"
        return f"<TwiddleCache n={self.n} {state}>"


def cache_create(n: int) -> TwiddleCache:
    """Build a :class:`TwiddleCache` for transforms of length *n*."""
    return TwiddleCache(n)


def cache_destroy(cache: TwiddleCache) -> None:
    """Release the storage of *cache*. Calling it twice is harmless."""
    cache.close()
