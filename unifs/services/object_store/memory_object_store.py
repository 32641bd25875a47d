from __future__ import annotations

import bisect

from unifs.services.object_store.interface import (
    ObjectInfo,
    ObjectListing,
    ObjectStoreInterface,
)


class MemoryObjectStore(ObjectStoreInterface):
    """In-memory object store for unit testing.

    Listings are paginated with the last returned key as the continuation
    token. Every call is appended to ``calls`` as ``(operation, argument)``.
    Missing keys raise the builtin ``FileNotFoundError``.
    """

    provider_name = "in-memory object store"

    def __init__(self, page_size: int | None = None) -> None:
        self._objects: dict[str, tuple[bytes, str]] = {}
        self._page_size = page_size
        self.calls: list[tuple[str, str]] = []

    # -- Test helpers ---------------------------------------------------------

    def seed(self, objects: dict[str, bytes | str]) -> None:
        for key, data in objects.items():
            payload = data.encode() if isinstance(data, str) else data
            self._objects[key] = (payload, "application/octet-stream")

    @property
    def keys(self) -> list[str]:
        return sorted(self._objects)

    def calls_to(self, operation: str) -> list[str]:
        return [arg for op, arg in self.calls if op == operation]

    # -- ObjectStoreInterface -------------------------------------------------

    async def list_objects(
        self, prefix: str, continuation_token: str | None = None, max_keys: int = 1000
    ) -> ObjectListing:
        self.calls.append(("list_objects", prefix))
        limit = min(max_keys, self._page_size) if self._page_size else max_keys
        ordered = [k for k in sorted(self._objects) if k.startswith(prefix)]
        start = bisect.bisect_right(ordered, continuation_token) if continuation_token else 0
        page = ordered[start : start + limit]
        more = start + limit < len(ordered)
        return ObjectListing(keys=page, continuation_token=page[-1] if more and page else None)

    async def get_object(self, key: str) -> bytes:
        self.calls.append(("get_object", key))
        if key not in self._objects:
            raise FileNotFoundError(f"Object not found: {key}")
        return self._objects[key][0]

    async def put_object(
        self, key: str, data: bytes, content_type: str = "application/octet-stream"
    ) -> None:
        self.calls.append(("put_object", key))
        self._objects[key] = (bytes(data), content_type)

    async def stat_object(self, key: str) -> ObjectInfo:
        self.calls.append(("stat_object", key))
        if key not in self._objects:
            raise FileNotFoundError(f"Object not found: {key}")
        data, content_type = self._objects[key]
        return ObjectInfo(key=key, size=len(data), content_type=content_type)

    async def copy_object(self, source_key: str, destination_key: str) -> None:
        self.calls.append(("copy_object", f"{source_key} -> {destination_key}"))
        if source_key not in self._objects:
            raise FileNotFoundError(f"Object not found: {source_key}")
        self._objects[destination_key] = self._objects[source_key]

    async def delete_object(self, key: str) -> None:
        self.calls.append(("delete_object", key))
        self._objects.pop(key, None)

    async def delete_objects(self, keys: list[str]) -> None:
        self.calls.append(("delete_objects", ",".join(keys)))
        for key in keys:
            self._objects.pop(key, None)

    def is_not_found(self, exc: BaseException) -> bool:
        return isinstance(exc, FileNotFoundError)

    def health_check(self) -> bool:
        return True
