"""In-memory range cache with TTL and FIFO eviction."""

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import replace
from typing import Optional
from shared.domain.consts import CacheDefaults
from shared.domain.models import CacheEntry, CacheStats
from shared.interfaces.range_cache import RangeCache

logger = logging.getLogger(__name__)


class MemoryRangeCache(RangeCache):
    """
    Bounded, time-expiring cache mapping prefix -> raw range body.

    Eviction is FIFO over first insertion: when full, the oldest inserted
    key goes first. Reads and overwrites never change a key's position, so
    this is not an LRU.

    Expired entries are dropped lazily on get(); there is no background
    sweeper.

    Thread-safety: a single lock guards the OrderedDict, which is both the
    key -> entry mapping and the eviction queue. Safe for concurrent use
    across threads sharing one client.
    """

    def __init__(
        self,
        max_entries: int = CacheDefaults.MAX_ENTRIES,
        default_ttl: float = CacheDefaults.TTL_SECONDS,
    ) -> None:
        """
        Initialize an empty cache.

        max_entries <= 0 means unbounded. A non-positive default_ttl falls
        back to CacheDefaults.TTL_SECONDS.
        """
        if default_ttl <= 0:
            default_ttl = CacheDefaults.TTL_SECONDS
        self.max_entries: int = max_entries
        self.default_ttl: float = default_ttl
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._stats = CacheStats()
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        """Get cached body for key if present and not expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._stats.misses += 1
                return None

            if entry.is_expired(time.time()):
                del self._entries[key]
                self._stats.expirations += 1
                self._stats.misses += 1
                logger.debug(f"Range cache: expired entry for prefix {key}")
                return None

            self._stats.hits += 1
            return entry.value

    def set(self, key: str, value: str, ttl: float) -> None:
        """
        Store body for key.

        Overwriting keeps the key's original eviction position.
        """
        if ttl <= 0:
            ttl = self.default_ttl

        with self._lock:
            entry = CacheEntry(value=value, expires_at=time.time() + ttl)
            if key not in self._entries and self.max_entries > 0:
                while len(self._entries) >= self.max_entries:
                    self._evict_oldest_locked()
            # Assigning to an existing OrderedDict key keeps its position
            self._entries[key] = entry

    def _evict_oldest_locked(self) -> None:
        """Evict the oldest inserted entry. Caller must hold the lock."""
        evicted_key, _ = self._entries.popitem(last=False)
        self._stats.evictions += 1
        logger.debug(f"Range cache: evicted prefix {evicted_key} (max_entries={self.max_entries})")

    def clear(self) -> None:
        """Remove all cached entries."""
        with self._lock:
            self._entries.clear()

    def stats(self) -> CacheStats:
        """Return a snapshot of the cache counters."""
        with self._lock:
            return replace(self._stats)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
