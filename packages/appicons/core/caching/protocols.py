"""Cache interface used by font resolution."""

from typing import Protocol, TypeVar

from pydantic import BaseModel

from appicons.core.caching.models import CacheKey

T = TypeVar("T", bound=BaseModel)


class Cache(Protocol):
    """Async key/value store for resolved lookups (currently font bytes).

    Entries are pydantic models. A ``load`` that finds an expired entry, or
    one stored under a different model class, reports a miss instead of
    raising.
    """

    async def exists(self, key: CacheKey) -> bool:
        """True if ``key`` holds a live entry."""
        ...

    async def load(self, key: CacheKey, model_cls: type[T]) -> T | None:
        """Return the entry validated as ``model_cls``, or None on a miss."""
        ...

    async def store(self, key: CacheKey, artifact: BaseModel) -> None: ...

    async def invalidate(self, key: CacheKey) -> None: ...

    async def clear(self) -> None: ...
