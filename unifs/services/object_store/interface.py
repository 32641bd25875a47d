"""Client capability for flat key-value object storage (S3 and friends).

Implementations raise their backend's native errors; adapters translate
them. ``is_not_found`` tells the translator which native errors mean that
the key does not exist.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class ObjectListing:
    """One page of a prefix listing."""

    keys: list[str] = field(default_factory=list)
    continuation_token: str | None = None


@dataclass
class ObjectInfo:
    key: str
    size: int
    content_type: str | None = None


class ObjectStoreInterface(ABC):
    provider_name: str = "object storage"

    @abstractmethod
    async def list_objects(
        self, prefix: str, continuation_token: str | None = None, max_keys: int = 1000
    ) -> ObjectListing:
        """List up to *max_keys* keys under *prefix*, recursively."""
        ...

    @abstractmethod
    async def get_object(self, key: str) -> bytes: ...

    @abstractmethod
    async def put_object(
        self, key: str, data: bytes, content_type: str = "application/octet-stream"
    ) -> None: ...

    @abstractmethod
    async def stat_object(self, key: str) -> ObjectInfo: ...

    @abstractmethod
    async def copy_object(self, source_key: str, destination_key: str) -> None:
        """Server-side copy within the same bucket."""
        ...

    @abstractmethod
    async def delete_object(self, key: str) -> None:
        """Delete a key. Deleting a missing key is not an error."""
        ...

    @abstractmethod
    async def delete_objects(self, keys: list[str]) -> None:
        """Bulk delete; raises if any key could not be deleted."""
        ...

    @abstractmethod
    def is_not_found(self, exc: BaseException) -> bool: ...

    @abstractmethod
    def health_check(self) -> bool: ...
