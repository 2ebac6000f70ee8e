"""Range cache implementations.

This package contains concrete implementations of the range cache interface.
"""

from shared.implementations.caches.memory_cache import MemoryRangeCache

__all__ = ["MemoryRangeCache"]
