"""Cache that never hits, for disabling font caching."""

from typing import TypeVar

from pydantic import BaseModel

from appicons.core.caching.models import CacheKey

T = TypeVar("T", bound=BaseModel)


class NullCache:
    """Every lookup misses and every store is dropped.

    Accepts ``ttl_seconds`` so it can be swapped in wherever a MemoryCache
    is built.
    """

    def __init__(self, ttl_seconds: float | None = None) -> None:
        self.ttl_seconds = ttl_seconds

    async def exists(self, key: CacheKey) -> bool:
        return False

    async def load(self, key: CacheKey, model_cls: type[T]) -> T | None:
        return None

    async def store(self, key: CacheKey, artifact: BaseModel) -> None:
        return None

    async def invalidate(self, key: CacheKey) -> None:
        return None

    async def clear(self) -> None:
        return None
