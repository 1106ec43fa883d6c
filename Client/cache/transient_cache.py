"""
PluginUpdater Client - Transient Cache

Key-value store with per-entry time-to-live, used for cache-aside reads
of update server responses. Expired entries are evicted lazily when they
are looked up; there is no background sweeper.

Author: PluginUpdater Project
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)


class _Missing:
    """Sentinel type for cache misses."""

    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


# Returned by get() on a miss, so that cached falsy values stay distinguishable
MISSING = _Missing()


@dataclass
class CacheEntry:
    """A cached value and the UNIX timestamp after which it is stale."""
    key: str
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class TransientCache:
    """
    Base class for TTL caches.

    Subclasses provide storage via _load_entry/_store_entry/_remove_entry;
    expiry handling lives here.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        """
        Initialize cache.

        Args:
            clock: Function returning the current UNIX time (injectable for tests)
        """
        self.clock = clock

    def get(self, key: str) -> Any:
        """
        Look up a key.

        Args:
            key: Cache key

        Returns:
            Cached value, or MISSING if absent or expired
        """
        entry = self._load_entry(key)
        if entry is None:
            return MISSING

        if entry.is_expired(self.clock()):
            logger.debug(f"Cache entry expired: {key}")
            self._remove_entry(key)
            return MISSING

        return entry.value

    def set(self, key: str, value: Any, ttl_seconds: int):
        """
        Store a value.

        Args:
            key: Cache key
            value: Value to store
            ttl_seconds: Seconds until the entry is treated as absent
        """
        entry = CacheEntry(key=key, value=value, expires_at=self.clock() + ttl_seconds)
        self._store_entry(entry)
        logger.debug(f"Cached {key} for {ttl_seconds}s")

    def delete(self, key: str):
        """Remove a key. Missing keys are ignored."""
        self._remove_entry(key)

    def _load_entry(self, key: str):
        raise NotImplementedError

    def _store_entry(self, entry: CacheEntry):
        raise NotImplementedError

    def _remove_entry(self, key: str):
        raise NotImplementedError


class MemoryTransientCache(TransientCache):
    """In-process TTL cache backed by a dict."""

    def __init__(self, clock: Callable[[], float] = time.time):
        super().__init__(clock)
        self._entries: Dict[str, CacheEntry] = {}

    def _load_entry(self, key: str):
        return self._entries.get(key)

    def _store_entry(self, entry: CacheEntry):
        self._entries[entry.key] = entry

    def _remove_entry(self, key: str):
        self._entries.pop(key, None)

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
