"""Argument validation shared by the public entry points."""

import operator

import numpy as np

from .config import COMPLEX_DTYPE
from .errors import BufferTooSmallError, InvalidSizeError


def check_size(n) -> int:
    """Return ``n`` as an ``int`` if it is a positive power of two."""
    if isinstance(n, bool):
        raise InvalidSizeError(n)
    try:
        n = operator.index(n)
    except TypeError:
        raise InvalidSizeError(n) from None
    if n <= 0 or n & (n - 1):
        raise InvalidSizeError(n)
    return n


def _check_array(buf, name: str) -> None:
    if not isinstance(buf, np.ndarray):
        raise TypeError(f"Buffer '{name}' must be a numpy.ndarray, got {type(buf).__name__}.")
    if buf.ndim != 1:
        raise ValueError(f"Buffer '{name}' must be one-dimensional, got shape {buf.shape}.")


def _check_writable(view: np.ndarray, name: str) -> None:
    if not view.flags.writeable:
        raise ValueError(f"Buffer '{name}' is read-only.")


def check_length(buf, n: int, name: str) -> None:
    if len(buf) < n:
        raise BufferTooSmallError(name, n, len(buf))


def check_signal(buf, n: int, name: str = "signal") -> np.ndarray:
    """Validate an in-place complex buffer and return the view of its first ``n`` samples."""
    _check_array(buf, name)
    if buf.dtype != COMPLEX_DTYPE:
        raise TypeError(f"Buffer '{name}' must have dtype complex64, got {buf.dtype}.")
    check_length(buf, n, name)
    view = buf[:n]
    _check_writable(view, name)
    if not view.flags.c_contiguous:
        raise ValueError(f"Buffer '{name}' must be C-contiguous.")
    return view


def check_real_output(buf, n: int, name: str) -> np.ndarray:
    """Validate a real-valued output buffer and return the view of its first ``n`` samples."""
    _check_array(buf, name)
    if not np.issubdtype(buf.dtype, np.floating):
        raise TypeError(f"Buffer '{name}' must have a floating-point dtype, got {buf.dtype}.")
    check_length(buf, n, name)
    view = buf[:n]
    _check_writable(view, name)
    return view


def resolve_size(n, buf) -> int:
    """Transform length: explicit ``n``, or the whole buffer."""
    return check_size(len(buf) if n is None else n)
