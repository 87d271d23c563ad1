"""
In-place radix-2 Cooley-Tukey FFT for power-of-two lengths.

    >>> import numpy as np
    >>> from fftalgos import cache_create, forward_inplace_cached
    >>> sig = np.ones(8, dtype=np.complex64)
    >>> with cache_create(8) as cache:
    ...     _ = forward_inplace_cached(sig, cache)
    >>> float(sig[0].real)
    8.0
"""

from .bitrev import bit_reverse_indices, bit_reverse_permute
from .config import ENGINES, get_engine, set_engine
from .errors import (
    BufferTooSmallError,
    ClosedCacheError,
    FFTError,
    InvalidSizeError,
    SizeMismatchError,
)
from .radix import (
    fft,
    forward,
    forward_inplace,
    forward_inplace_cached,
    ifft,
    inverse,
    inverse_inplace,
    inverse_inplace_cached,
)
from .twiddle import TwiddleCache, cache_create, cache_destroy, fill_twiddles

__version__ = "0.1.0"

__all__ = [
    "BufferTooSmallError",
    "ClosedCacheError",
    "ENGINES",
    "FFTError",
    "InvalidSizeError",
    "SizeMismatchError",
    "TwiddleCache",
    "bit_reverse_indices",
    "bit_reverse_permute",
    "cache_create",
    "cache_destroy",
    "fft",
    "fill_twiddles",
    "forward",
    "forward_inplace",
    "forward_inplace_cached",
    "get_engine",
    "ifft",
    "inverse",
    "inverse_inplace",
    "inverse_inplace_cached",
    "set_engine",
]
