"""
Module-level settings for ``fftalgos``.

The butterfly engine used when a call does not name one is process-wide state.
Its initial value comes from the ``FFTALGOS_ENGINE`` environment variable and
can be changed at runtime with :func:`set_engine`.
"""

import logging
import os
import threading

import numpy as np

logger = logging.getLogger(__name__)

# single precision only
COMPLEX_DTYPE = np.complex64
REAL_DTYPE = np.float32

ENGINES = ("iterative", "recursive")
DEFAULT_ENGINE = "iterative"
ENGINE_ENV_VAR = "FFTALGOS_ENGINE"

_engine_lock = threading.Lock()


def _engine_from_env() -> str:
    value = os.environ.get(ENGINE_ENV_VAR)
    if not value:
        return DEFAULT_ENGINE
    name = value.strip().lower()
    if name not in ENGINES:
        logger.warning(
            f"Ignoring {ENGINE_ENV_VAR}={value!r}: expected one of {ENGINES}, "
            f"using '{DEFAULT_ENGINE}'"
        )
        return DEFAULT_ENGINE
    return name


_engine = _engine_from_env()


def get_engine() -> str:
    """Return the name of the engine used when a call does not pick one."""
    return _engine


def set_engine(name: str) -> None:
    """Select the default butterfly engine (``"iterative"`` or ``"recursive"``)."""
    global _engine
    name = resolve_engine(name)
    with _engine_lock:
        if name != _engine:
            logger.debug(f"Default FFT engine changed from '{_engine}' to '{name}'")
        _engine = name


def resolve_engine(name=None) -> str:
    """Validate an explicit engine name, or fall back to the configured default."""
    if name is None:
        return _engine
    key = str(name).strip().lower()
    if key not in ENGINES:
        raise ValueError(f"Unknown FFT engine {name!r}; choose one of {ENGINES}.")
    return key
