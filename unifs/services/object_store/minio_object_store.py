"""MinIO (S3-compatible) object store client."""

from __future__ import annotations

import asyncio
import io
from typing import Any

from unifs.services.object_store.interface import (
    ObjectInfo,
    ObjectListing,
    ObjectStoreInterface,
)
from unifs.services.secrets.interface import SecretsInterface

_NOT_FOUND_CODES = frozenset({"NoSuchKey", "NoSuchObject", "NoSuchVersion"})


class BulkDeleteError(Exception):
    """Raised when MinIO reports per-key failures for a bulk delete."""

    def __init__(self, failures: list[tuple[str, str]]) -> None:
        names = ", ".join(f"{name} ({code})" for name, code in failures[:5])
        more = f" and {len(failures) - 5} more" if len(failures) > 5 else ""
        super().__init__(f"Failed to delete {len(failures)} object(s): {names}{more}")
        self.failures = failures


class MinioObjectStore(ObjectStoreInterface):
    """Object store backed by MinIO or any S3-compatible endpoint.

    Config (via secrets, ``<prefix>`` defaults to ``FS_MINIO``):
        <prefix>_ENDPOINT   - Host:port of the server (default: localhost:9000)
        <prefix>_ACCESS_KEY - Access key (default: minioadmin)
        <prefix>_SECRET_KEY - Secret key (default: minioadmin)
        <prefix>_BUCKET     - Bucket name (default: unifs)
        <prefix>_SECURE     - Use HTTPS (default: false)

    The SDK is synchronous, so every call runs in a worker thread.
    Listings use the last returned key as the continuation cursor
    (``start_after``).
    """

    provider_name = "MinIO"

    def __init__(
        self,
        secrets: SecretsInterface,
        prefix: str = "FS_MINIO",
        client: Any = None,
    ) -> None:
        self._bucket = secrets.get_or_default(f"{prefix}_BUCKET", "unifs")
        if client is None:
            from minio import Minio

            endpoint = secrets.get_or_default(f"{prefix}_ENDPOINT", "localhost:9000")
            access_key = secrets.get_or_default(f"{prefix}_ACCESS_KEY", "minioadmin")
            secret_key = secrets.get_or_default(f"{prefix}_SECRET_KEY", "minioadmin")
            secure = secrets.get_or_default(f"{prefix}_SECURE", "false").lower() == "true"
            client = Minio(endpoint, access_key=access_key, secret_key=secret_key, secure=secure)
        self._client = client
        self._ensure_bucket()

    @property
    def bucket(self) -> str:
        return self._bucket

    def _ensure_bucket(self) -> None:
        if not self._client.bucket_exists(self._bucket):
            self._client.make_bucket(self._bucket)

    # -- ObjectStoreInterface -------------------------------------------------

    async def list_objects(
        self, prefix: str, continuation_token: str | None = None, max_keys: int = 1000
    ) -> ObjectListing:
        return await asyncio.to_thread(self._list_page, prefix, continuation_token, max_keys)

    async def get_object(self, key: str) -> bytes:
        return await asyncio.to_thread(self._get, key)

    async def put_object(
        self, key: str, data: bytes, content_type: str = "application/octet-stream"
    ) -> None:
        await asyncio.to_thread(
            self._client.put_object,
            self._bucket,
            key,
            io.BytesIO(data),
            length=len(data),
            content_type=content_type,
        )

    async def stat_object(self, key: str) -> ObjectInfo:
        stat = await asyncio.to_thread(self._client.stat_object, self._bucket, key)
        return ObjectInfo(key=key, size=stat.size or 0, content_type=stat.content_type)

    async def copy_object(self, source_key: str, destination_key: str) -> None:
        from minio.commonconfig import CopySource

        await asyncio.to_thread(
            self._client.copy_object,
            self._bucket,
            destination_key,
            CopySource(self._bucket, source_key),
        )

    async def delete_object(self, key: str) -> None:
        await asyncio.to_thread(self._client.remove_object, self._bucket, key)

    async def delete_objects(self, keys: list[str]) -> None:
        await asyncio.to_thread(self._remove_many, keys)

    def is_not_found(self, exc: BaseException) -> bool:
        from minio.error import S3Error

        return isinstance(exc, S3Error) and exc.code in _NOT_FOUND_CODES

    def health_check(self) -> bool:
        try:
            return bool(self._client.bucket_exists(self._bucket))
        except Exception:
            return False

    # -- Blocking helpers (run in a worker thread) ----------------------------

    def _list_page(self, prefix: str, start_after: str | None, max_keys: int) -> ObjectListing:
        objects = self._client.list_objects(
            self._bucket, prefix=prefix, recursive=True, start_after=start_after
        )
        keys: list[str] = []
        # Read one key past the page so we know whether another page exists.
        for obj in objects:
            if not obj.object_name or obj.is_dir:
                continue
            keys.append(obj.object_name)
            if len(keys) > max_keys:
                break
        if len(keys) > max_keys:
            page = keys[:max_keys]
            return ObjectListing(keys=page, continuation_token=page[-1])
        return ObjectListing(keys=keys)

    def _get(self, key: str) -> bytes:
        response = None
        try:
            response = self._client.get_object(self._bucket, key)
            return response.read()
        finally:
            if response is not None:
                response.close()
                response.release_conn()

    def _remove_many(self, keys: list[str]) -> None:
        from minio.deleteobjects import DeleteObject

        errors = self._client.remove_objects(self._bucket, [DeleteObject(k) for k in keys])
        # remove_objects is lazy: nothing is deleted until the result is consumed
        failures = [(err.name, err.code) for err in errors]
        if failures:
            raise BulkDeleteError(failures)
