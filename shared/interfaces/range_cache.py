"""Abstract range cache interface."""

from abc import ABC, abstractmethod
from typing import Optional


class RangeCache(ABC):
    """Abstract cache of range responses keyed by hash prefix.

    All range caches must implement:
    - get: Return the cached body for a prefix, or None on miss
    - set: Store a body for a prefix with a time-to-live

    Implementations must be safe for concurrent use from multiple threads
    without external locking.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get cached value for key.

        Args:
            key: Hash prefix

        Returns:
            Cached response body, or None if absent or expired.
            An empty string is a valid cached body.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str, ttl: float) -> None:
        """Store value for key.

        Args:
            key: Hash prefix
            value: Raw response body
            ttl: Seconds until the entry goes stale; non-positive means
                the implementation's default
        """
        pass
