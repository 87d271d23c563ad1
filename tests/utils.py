"""Helpers shared by the test modules."""

import numpy as np

POWERS_OF_TWO = [1, 2, 4, 8, 16, 64, 256, 1024]


def random_complex(rng, n):
    return (rng.standard_normal(n) + 1j * rng.standard_normal(n)).astype(np.complex64)


def spectrum_tol(n):
    """Absolute tolerance for float32 spectra of unit-variance signals."""
    return 1e-5 * n + 1e-5
