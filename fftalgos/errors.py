"""Errors raised by the public transform entry points."""


class FFTError(ValueError):
    """Base class for every contract violation reported by ``fftalgos``."""


class InvalidSizeError(FFTError):
    """Transform length is zero, negative, or not a power of two."""

    def __init__(self, n):
        super().__init__(f"Transform length must be a positive power of two, got {n!r}.")
        self.n = n


class SizeMismatchError(FFTError):
    """A twiddle cache (or twiddle table) was built for a different length."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Twiddle cache was built for n = {expected}, but the transform length is {actual}."
        )
        self.expected = expected
        self.actual = actual


class BufferTooSmallError(FFTError):
    """A supplied buffer holds fewer elements than the transform needs."""

    def __init__(self, name: str, required: int, actual: int):
        super().__init__(f"Buffer '{name}' holds {actual} elements, needs at least {required}.")
        self.name = name
        self.required = required
        self.actual = actual


class ClosedCacheError(FFTError):
    """A twiddle cache was used after it was destroyed."""
