"""
Timing and accuracy check: uncached vs cached in-place transforms.

    python -m fftalgos.benchmark --sizes 1048576 4194304 --repeat 3
"""

import argparse
import logging
import time
from dataclasses import dataclass

import numpy as np

from ._checks import check_size
from .config import COMPLEX_DTYPE, ENGINES, get_engine, set_engine
from .errors import FFTError
from .radix import forward_inplace, forward_inplace_cached
from .twiddle import cache_create

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    n: int
    engine: str
    uncached_seconds: float
    cached_seconds: float
    rel_err: float

    @property
    def speedup(self) -> float:
        return self.uncached_seconds / self.cached_seconds if self.cached_seconds > 0 else float("inf")


def _best_of(func, signal: np.ndarray, repeat: int) -> float:
    best = float("inf")
    for _ in range(repeat):
        buf = signal.copy()
        start = time.perf_counter()
        func(buf)
        best = min(best, time.perf_counter() - start)
    return best


def run_benchmark(n: int, repeat: int = 3, seed: int = 0) -> BenchmarkResult:
    """Time both in-place variants on one random signal and check them against NumPy."""
    if repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {repeat}.")
    rng = np.random.default_rng(seed)
    x = (rng.standard_normal(n) + 1j * rng.standard_normal(n)).astype(COMPLEX_DTYPE)

    uncached = _best_of(forward_inplace, x, repeat)
    with cache_create(n) as cache:
        cached = _best_of(lambda buf: forward_inplace_cached(buf, cache), x, repeat)
        X_r = forward_inplace_cached(x.copy(), cache)

    X_np = np.fft.fft(x.astype(np.complex128))
    # max relative error, floored to avoid dividing by zero
    rel_err = float(np.max(np.abs(X_r - X_np) / np.maximum(np.abs(X_np), 1e-12)))
    return BenchmarkResult(n, get_engine(), uncached, cached, rel_err)


def print_result(result: BenchmarkResult) -> None:
    print(f"\nRadix-2 FFT, N = {result.n} ({result.engine})")
    print(f"  uncached: {result.uncached_seconds:.4f} s")
    print(f"  cached:   {result.cached_seconds:.4f} s  (x{result.speedup:.2f})")
    print(f"  max relative error vs numpy.fft = {result.rel_err:.2e}")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--sizes", type=int, nargs="+", default=[1 << 16, 1 << 18, 1 << 20])
    parser.add_argument("--repeat", type=_positive_int, default=3)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--engine", choices=ENGINES, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    try:
        sizes = [check_size(n) for n in args.sizes]
    except FFTError as exc:
        parser.error(f"--sizes: {exc}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    if args.engine is not None:
        set_engine(args.engine)

    for n in sizes:
        logger.debug(f"Benchmarking n = {n}")
        print_result(run_benchmark(n, repeat=args.repeat, seed=args.seed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
