"""Caching for resolved resources.

Caches are plain objects injected into their consumers; nothing is held in
module-level state. Two backends are provided:
- MemoryCache: in-process, with a fixed TTL
- NullCache: always misses
"""

from appicons.core.caching.backends.memory import MemoryCache
from appicons.core.caching.backends.null import NullCache
from appicons.core.caching.models import CacheKey, CacheMeta
from appicons.core.caching.protocols import Cache

__all__ = [
    # Core
    "Cache",
    "CacheKey",
    "CacheMeta",
    # Backends
    "MemoryCache",
    "NullCache",
]
