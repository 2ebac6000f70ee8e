"""Factory for creating range cache instances."""

from typing import Optional
from shared.config.config import config
from shared.domain.consts import CacheBackend
from shared.interfaces.range_cache import RangeCache
from shared.implementations.caches import MemoryRangeCache


def _create_memory_cache() -> RangeCache:
    return MemoryRangeCache(
        max_entries=config.BREACH_CACHE_MAX_ENTRIES,
        default_ttl=config.BREACH_CACHE_TTL,
    )


CACHES = {
    CacheBackend.MEMORY: _create_memory_cache,
}


def create_cache(backend: Optional[str] = None) -> Optional[RangeCache]:
    """Factory for creating range caches.

    Defaults to config.BREACH_CACHE_BACKEND when backend is not given.
    BreachClient never calls this itself: callers that want the
    env-configured cache must call create_cache() and pass the result in.

    Returns:
        RangeCache instance, or None for the "none" backend

    Raises:
        ValueError: If backend is unknown
    """
    name = (backend if backend is not None else config.BREACH_CACHE_BACKEND).strip().lower()
    if name == CacheBackend.NONE:
        return None
    try:
        factory = CACHES[CacheBackend(name)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown cache backend: {name}")
    return factory()
