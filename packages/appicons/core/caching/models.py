"""Models for the cache system."""

from pydantic import BaseModel, ConfigDict, Field


class CacheKey(BaseModel):
    """
    Stable identifier for a cache entry.

    Identifies a cached lookup by namespace (e.g. 'fonts') and a
    normalized lookup key within it.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(description="Cache namespace (e.g., 'fonts')")
    key: str = Field(description="Normalized lookup key within the namespace")

    def __str__(self) -> str:
        return f"{self.namespace}:{self.key}"


class CacheMeta(BaseModel):
    """
    Metadata stored next to each cached artifact.
    """

    created_at: float = Field(description="Clock reading (seconds) when the entry was stored")
    artifact_model: str = Field(description="Fully-qualified artifact model class name")
