"""
Compute-once memoization for build-time queries.

Entries live as long as the cache object. There is no expiry, eviction or
invalidation: one cache serves one build run.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
import logging
import time
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReentrantQueryError(RuntimeError):
    """Raised when a key is requested while its own value is being computed."""


@dataclass
class CacheStats:
    """Counters collected by a QueryCache.

    Attributes:
        entries: Number of stored keys
        hits: Lookups answered from the cache
        misses: Lookups that ran the compute function
    """
    entries: int = 0
    hits: int = 0
    misses: int = 0


class QueryCache:
    """Key to value store with lazy, compute-once-per-key semantics.

    Keys are any hashable value; query builders use tuples so that
    parameter values never need escaping.
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, Any] = {}
        self._pending: set[Hashable] = set()
        self._hits = 0
        self._misses = 0

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        """Return the value stored under ``key``, computing it on first use.

        If ``compute`` raises, nothing is stored and the error propagates.

        Args:
            key: Hashable cache key
            compute: Zero-argument callable producing the value

        Returns:
            The stored value (the same object on every call)
        """
        if key in self._entries:
            self._hits += 1
            return self._entries[key]
        if key in self._pending:
            raise ReentrantQueryError(f"Query {key!r} requested during its own computation")

        self._misses += 1
        self._pending.add(key)
        started = time.perf_counter()
        try:
            value = compute()
        finally:
            self._pending.discard(key)
        self._entries[key] = value
        logger.debug(
            "Computed %r in %.2f ms", key, (time.perf_counter() - started) * 1000
        )
        return value

    def stats(self) -> CacheStats:
        return CacheStats(entries=len(self._entries), hits=self._hits, misses=self._misses)
