"""Bounded LRU cache of compiled patterns.

Shared by every compilation in the process (see ``get_regex_cache``), or
injected per call through ``ValidationOptions.regex_cache``. Keys are the
original, untranslated pattern strings; values are compiled matchers and are
never replaced once inserted.
"""
from __future__ import annotations

import threading
from collections import OrderedDict
from functools import lru_cache
from typing import Callable

import regex

from schemagate.core.config import settings
from schemagate.core.logging import regex_logger


class RegexCache:
    """Thread-safe, capacity-bounded, least-recently-used pattern cache.

    Every operation holds the lock only for the dictionary update; compiling a
    pattern and matching with it both happen outside the lock.

    Usage:
        cache = RegexCache(capacity=10)
        matcher = cache.get_or_compile("^f", convert_regex)
    """

    def __init__(self, capacity: int = 10):
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of compiled patterns kept
        """
        if capacity < 1:
            raise ValueError(f"Regex cache capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._lock = threading.Lock()

        # OrderedDict for LRU behavior: oldest first, most recently used last
        self._entries: OrderedDict[str, regex.Pattern] = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: str) -> regex.Pattern | None:
        """
        Look up a compiled pattern, promoting it to most recently used.

        Returns:
            The compiled pattern, or None on a miss
        """
        with self._lock:
            if key not in self._entries:
                return None
            self._entries.move_to_end(key)
            return self._entries[key]

    def insert(self, key: str, value: regex.Pattern) -> regex.Pattern:
        """
        Insert a compiled pattern, evicting the least recently used entry if full.

        An existing entry is kept (and promoted) rather than replaced.

        Returns:
            The pattern now cached under ``key``
        """
        evicted: str | None = None
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                return self._entries[key]
            if len(self._entries) >= self._capacity:
                evicted, _ = self._entries.popitem(last=False)
            self._entries[key] = value
        if evicted is not None:
            regex_logger().debug("regex_cache_evicted", pattern=evicted, capacity=self._capacity)
        return value

    def get_or_compile(self, key: str, compile_fn: Callable[[str], regex.Pattern]) -> regex.Pattern:
        """
        Return the cached pattern for ``key`` or compile and cache it.

        Raises:
            Whatever ``compile_fn`` raises; failed compilations are not cached.
        """
        if (cached := self.get(key)) is not None:
            return cached
        regex_logger().debug("regex_cache_miss", pattern=key)
        return self.insert(key, compile_fn(key))

    def keys(self) -> list[str]:
        """Cached keys, least recently used first."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        """Membership test. Does not change recency."""
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


@lru_cache
def get_regex_cache() -> RegexCache:
    """Process-wide cache used when no cache is injected."""
    return RegexCache(capacity=settings.REGEX_CACHE_SIZE)
