"""Tests for QueryCache compute-once behavior."""

import pytest

from site_queries.cache import QueryCache, ReentrantQueryError


def test_get_or_compute_runs_compute_once():
    cache = QueryCache()
    calls = 0

    def compute():
        nonlocal calls
        calls += 1
        return {"value": 42}

    first = cache.get_or_compute(("answer",), compute)
    second = cache.get_or_compute(("answer",), compute)

    assert calls == 1
    assert first == {"value": 42}
    assert second is first
    assert ("answer",) in cache
    assert len(cache) == 1


def test_distinct_keys_are_computed_separately():
    cache = QueryCache()

    assert cache.get_or_compute(("q", "a"), lambda: 1) == 1
    assert cache.get_or_compute(("q", "b"), lambda: 2) == 2
    assert cache.get_or_compute(("q", "a"), lambda: 3) == 1


def test_stats_count_hits_and_misses():
    cache = QueryCache()
    cache.get_or_compute("k1", lambda: 1)
    cache.get_or_compute("k1", lambda: 1)
    cache.get_or_compute("k1", lambda: 1)
    cache.get_or_compute("k2", lambda: 2)

    stats = cache.stats()
    assert stats.entries == 2
    assert stats.hits == 2
    assert stats.misses == 2


def test_failed_compute_is_not_stored():
    cache = QueryCache()

    def boom():
        raise RuntimeError("load failed")

    with pytest.raises(RuntimeError, match="load failed"):
        cache.get_or_compute("key", boom)

    assert "key" not in cache
    assert cache.get_or_compute("key", lambda: "ok") == "ok"


def test_reentrant_compute_raises():
    cache = QueryCache()

    def compute():
        return cache.get_or_compute("loop", compute)

    with pytest.raises(ReentrantQueryError):
        cache.get_or_compute("loop", compute)

    assert "loop" not in cache


def test_nested_compute_for_other_key_is_allowed():
    cache = QueryCache()

    def outer():
        return cache.get_or_compute("inner", lambda: 5) * 2

    assert cache.get_or_compute("outer", outer) == 10
    assert len(cache) == 2
