"""Tests for twiddle factors and TwiddleCache."""

import gc
import logging
import weakref

import numpy as np
import pytest

from fftalgos import (
    BufferTooSmallError,
    ClosedCacheError,
    InvalidSizeError,
    SizeMismatchError,
    TwiddleCache,
    cache_create,
    cache_destroy,
    fill_twiddles,
    forward_inplace_cached,
    inverse_inplace_cached,
)
from fftalgos.twiddle import compute_twiddles
from tests.utils import random_complex


class TestCacheContents:
    @pytest.mark.parametrize("n", [2, 4, 16, 1024])
    def test_table_values(self, n):
        cache = cache_create(n)
        k = np.arange(n // 2)
        assert cache.lut.dtype == np.complex64
        assert len(cache.lut) == n // 2
        np.testing.assert_allclose(cache.lut, np.exp(-2j * np.pi * k / n), atol=1e-6)

    def test_size_one_has_empty_table(self):
        cache = cache_create(1)
        assert cache.n == 1
        assert len(cache.lut) == 0

    def test_table_is_read_only(self):
        cache = cache_create(8)
        with pytest.raises(ValueError):
            cache.lut[0] = 0

    @pytest.mark.parametrize("m", [1, 2, 4, 8, 32])
    def test_stride_matches_direct_twiddles(self, m):
        cache = cache_create(32)
        np.testing.assert_allclose(cache.stride_for(m), compute_twiddles(m), atol=1e-6)
        assert len(cache.stride_for(m)) == m // 2

    def test_stride_beyond_size(self):
        with pytest.raises(SizeMismatchError):
            cache_create(8).stride_for(16)

    @pytest.mark.parametrize("n", [0, 3, 6, 2.0, "8"])
    def test_rejects_bad_sizes(self, n):
        with pytest.raises(InvalidSizeError):
            cache_create(n)


class TestCacheLifecycle:
    def test_destroy_then_use(self):
        cache = cache_create(8)
        cache_destroy(cache)
        assert cache.closed
        with pytest.raises(ClosedCacheError):
            cache.lut

    def test_destroy_twice(self):
        cache = cache_create(8)
        cache_destroy(cache)
        cache_destroy(cache)
        assert cache.closed

    def test_context_manager_closes(self):
        with cache_create(16) as cache:
            assert not cache.closed
            assert "open" in repr(cache)
        assert cache.closed
        assert "closed" in repr(cache)

    def test_require_checks_size(self):
        cache = cache_create(8)
        assert cache.require(8) is cache.lut
        with pytest.raises(SizeMismatchError) as exc_info:
            cache.require(16)
        assert exc_info.value.expected == 8
        assert exc_info.value.actual == 16

    def test_logs_lifecycle(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fftalgos.twiddle"):
            with cache_create(4):
                pass
        messages = [r.getMessage() for r in caplog.records]
        assert any("Created twiddle cache for n = 4" in m for m in messages)
        assert any("Destroyed twiddle cache for n = 4" in m for m in messages)


class TestCallerStorage:
    def test_fill_and_adopt(self):
        storage = np.zeros(4, dtype=np.complex64)
        cache = TwiddleCache(8, lut=storage)
        assert cache.lut is storage
        assert not storage.flags.writeable
        np.testing.assert_allclose(storage, compute_twiddles(8), atol=1e-7)

    def test_fill_twiddles_returns_out(self):
        out = np.zeros(8, dtype=np.complex64)
        assert fill_twiddles(16, out) is out
        assert out[0] == 1

    def test_short_storage(self):
        with pytest.raises(BufferTooSmallError):
            fill_twiddles(16, np.zeros(4, dtype=np.complex64))

    def test_long_storage(self):
        with pytest.raises(SizeMismatchError):
            fill_twiddles(16, np.zeros(16, dtype=np.complex64))

    def test_wrong_dtype(self):
        with pytest.raises(TypeError):
            fill_twiddles(16, np.zeros(8, dtype=np.complex128))


class TestCacheOwnership:
    def test_swap_pairs_match_bit_reversal(self):
        cache = cache_create(8)
        lo, hi = cache.swap_pairs
        assert list(zip(lo.tolist(), hi.tolist())) == [(1, 4), (3, 6)]
        assert not lo.flags.writeable

    def test_destroy_releases_every_array(self, rng):
        n = 1024
        cache = cache_create(n)
        sig = random_complex(rng, n)
        forward_inplace_cached(sig, cache)
        inverse_inplace_cached(sig, cache)

        refs = [weakref.ref(cache.lut)] + [weakref.ref(a) for a in cache.swap_pairs]
        cache_destroy(cache)
        gc.collect()
        assert [ref() for ref in refs] == [None, None, None]
        with pytest.raises(ClosedCacheError):
            cache.swap_pairs

    def test_caller_storage_stays_caller_owned(self):
        base = np.zeros(8, dtype=np.complex64)
        cache = TwiddleCache(16, lut=base[:])
        assert not cache.lut.flags.writeable
        assert cache.lut.base is base
        # the caller's base array is not locked; writes through it reach the table
        base[1] = 0
        assert cache.lut[1] == 0
