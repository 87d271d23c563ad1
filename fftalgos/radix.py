"""
Forward and inverse radix-2 FFT entry points.

Every function validates its arguments before it touches any data, then
runs bit-reversal and the butterfly stage in place on the caller's buffer:

    forward:  permute -> combine
    inverse:  combine -> permute

Buffers are only borrowed for the duration of a call.
"""

from typing import Optional

import numpy as np

from ._checks import check_length, check_real_output, check_signal, resolve_size
from .bitrev import permute
from .butterfly import forward_combine, inverse_combine
from .config import COMPLEX_DTYPE, REAL_DTYPE
from .twiddle import TwiddleCache


def _forward(view: np.ndarray, cache: Optional[TwiddleCache] = None) -> None:
    permute(view, None if cache is None else cache.swap_pairs)
    forward_combine(view, cache)


def _inverse(view: np.ndarray, cache: Optional[TwiddleCache] = None) -> None:
    inverse_combine(view, cache)
    permute(view, None if cache is None else cache.swap_pairs)


# ---------------- in-place ---------------- #

def forward_inplace(signal: np.ndarray, n: Optional[int] = None) -> np.ndarray:
    """Overwrite the first *n* time-domain samples of *signal* with their DFT.

    Parameters
    ----------
    signal : ndarray of complex64
        One-dimensional, writable, C-contiguous buffer.
    n : int, optional
        Transform length, a power of two. Defaults to ``len(signal)``.

    Returns
    -------
    ndarray
        *signal* itself.
    """
    n = resolve_size(n, signal)
    _forward(check_signal(signal, n))
    return signal


def inverse_inplace(signal: np.ndarray, n: Optional[int] = None) -> np.ndarray:
    """Overwrite the first *n* frequency-domain samples of *signal* with the time signal."""
    n = resolve_size(n, signal)
    _inverse(check_signal(signal, n))
    return signal


def forward_inplace_cached(signal: np.ndarray, cache: TwiddleCache, n: Optional[int] = None) -> np.ndarray:
    """:func:`forward_inplace` with twiddles and swap pairs read from *cache*.

    The transform length (``n``, or ``len(signal)``) must equal ``cache.n``.
    """
    n = resolve_size(n, signal)
    cache.require(n)
    _forward(check_signal(signal, n), cache)
    return signal


def inverse_inplace_cached(signal: np.ndarray, cache: TwiddleCache, n: Optional[int] = None) -> np.ndarray:
    """:func:`inverse_inplace` with twiddles and swap pairs read from *cache*."""
    n = resolve_size(n, signal)
    cache.require(n)
    _inverse(check_signal(signal, n), cache)
    return signal


# ---------------- separate buffers ---------------- #

def forward(time_domain, freq_domain: np.ndarray, n: Optional[int] = None) -> np.ndarray:
    """Write the DFT of the real sequence *time_domain* into *freq_domain*.

    *time_domain* is read only. *freq_domain* must be a complex64 buffer of
    at least *n* elements (``n`` defaults to ``len(time_domain)``).
    """
    n = resolve_size(n, time_domain)
    check_length(time_domain, n, "time_domain")
    samples = np.asarray(time_domain[:n], dtype=REAL_DTYPE)
    if samples.ndim != 1:
        raise ValueError(f"Buffer 'time_domain' must be one-dimensional, got shape {samples.shape}.")
    view = check_signal(freq_domain, n, "freq_domain")

    view.real = samples
    view.imag = 0
    _forward(view)
    return freq_domain


def inverse(time_domain: np.ndarray, freq_domain: np.ndarray, n: Optional[int] = None) -> np.ndarray:
    """Recover the real time signal from *freq_domain* into *time_domain*.

    *freq_domain* is used as scratch space and holds the complex time signal
    afterwards; only its real part is copied out. ``n`` defaults to
    ``len(freq_domain)``.
    """
    n = resolve_size(n, freq_domain)
    view = check_signal(freq_domain, n, "freq_domain")
    out = check_real_output(time_domain, n, "time_domain")

    _inverse(view)
    out[:] = view.real
    return time_domain


# ---------------- allocating wrappers ---------------- #

def fft(x) -> np.ndarray:
    """Return the DFT of *x* (real or complex, power-of-two length) as a new complex64 array."""
    buf = np.array(x, dtype=COMPLEX_DTYPE, ndmin=1)
    if buf.ndim != 1:
        raise ValueError(f"Input must be one-dimensional, got shape {buf.shape}.")
    return forward_inplace(buf)


def ifft(X) -> np.ndarray:
    """Return the real part of the inverse DFT of *X* as a new float32 array. *X* is not modified."""
    buf = np.array(X, dtype=COMPLEX_DTYPE, ndmin=1)
    if buf.ndim != 1:
        raise ValueError(f"Input must be one-dimensional, got shape {buf.shape}.")
    inverse_inplace(buf)
    return buf.real.astype(REAL_DTYPE)
