"""In-process cache with a fixed time-to-live.

Entries live in a dict owned by the cache instance, so every consumer that
needs sharing must be handed the same instance explicitly.
"""

import asyncio
import logging
import time
from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from appicons.core.caching.models import CacheKey, CacheMeta

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class MemoryCache:
    """
    Async in-memory cache with TTL expiry.

    Entries older than ``ttl_seconds`` are treated as misses and dropped on
    access. ``ttl_seconds=None`` keeps entries until invalidated or cleared.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize memory cache.

        Args:
            ttl_seconds: Entry lifetime in seconds (None = no expiry)
            clock: Monotonic time source, injectable for tests
        """
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[CacheKey, tuple[CacheMeta, BaseModel]] = {}
        self._lock = asyncio.Lock()

    @property
    def ttl_seconds(self) -> float | None:
        return self._ttl_seconds

    def __len__(self) -> int:
        return len(self._entries)

    def _is_expired(self, meta: CacheMeta) -> bool:
        if self._ttl_seconds is None:
            return False
        return meta.created_at + self._ttl_seconds < self._clock()

    async def _get(self, key: CacheKey) -> tuple[CacheMeta, BaseModel] | None:
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._is_expired(entry[0]):
                logger.debug("Cache entry expired: %s", key)
                del self._entries[key]
                return None
            return entry

    async def exists(self, key: CacheKey) -> bool:
        """Check if an unexpired entry exists (async)."""
        return await self._get(key) is not None

    async def load(self, key: CacheKey, model_cls: type[T]) -> T | None:
        """Load an entry validated as ``model_cls``, None on miss (async)."""
        entry = await self._get(key)
        if entry is None:
            return None
        _, artifact = entry
        if isinstance(artifact, model_cls):
            return artifact
        try:
            return model_cls.model_validate(artifact.model_dump())
        except ValidationError:
            logger.warning("Cached artifact for %s does not match %s", key, model_cls.__name__)
            return None

    async def store(self, key: CacheKey, artifact: BaseModel) -> None:
        """Store an entry stamped with the current clock reading (async)."""
        meta = CacheMeta(
            created_at=self._clock(),
            artifact_model=f"{type(artifact).__module__}.{type(artifact).__qualname__}",
        )
        async with self._lock:
            self._entries[key] = (meta, artifact)

    async def invalidate(self, key: CacheKey) -> None:
        """Delete one entry (async)."""
        async with self._lock:
            self._entries.pop(key, None)

    async def clear(self) -> None:
        """Delete every entry (async)."""
        async with self._lock:
            self._entries.clear()
