"""Shared plumbing for the public managers.

Resolves the adapter, prepends its root to the request, runs the adapter
call with a cancellation token, then strips the root back off the result.
Errors that are not already part of the domain taxonomy are wrapped in
``ProviderOperationError``; nothing is swallowed.
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable, TypeVar

from unifs.core.cancellation import CancellationToken
from unifs.core.errors import FilesystemError, ProviderOperationError
from unifs.core.models import (
    AdapterAwareDirectoryRepresentation,
    AdapterAwareFileRepresentation,
    DirectoryRepresentation,
    FileRepresentation,
)
from unifs.core.paths import strip_root
from unifs.services.adapter.registry import AdapterRegistration, AdapterRegistry
from unifs.services.logger.interface import LoggingInterface
from unifs.services.logger.noop_logger import NoopLogger
from unifs.services.metrics.interface import MetricsInterface
from unifs.services.metrics.noop_metrics import NoopMetrics

T = TypeVar("T")

_COUNTER = "adapter_operations_total"


def _describe(request: Any) -> dict[str, str]:
    ctx: dict[str, str] = {}
    for field in ("path", "source", "destination"):
        value = getattr(request, field, None)
        if value is not None:
            ctx[field] = value.normalized
    return ctx


class BaseAdapterManager:
    def __init__(
        self,
        registry: AdapterRegistry,
        logger: LoggingInterface | None = None,
        metrics: MetricsInterface | None = None,
    ) -> None:
        self._registry = registry
        self._log = logger or NoopLogger()
        self._metrics = metrics or NoopMetrics()

    @property
    def registry(self) -> AdapterRegistry:
        return self._registry

    async def _invoke(
        self,
        adapter: str,
        operation: str,
        request: Any,
        call: Callable[[AdapterRegistration, Any, CancellationToken], Awaitable[T]],
        cancellation: CancellationToken | None,
    ) -> tuple[AdapterRegistration, T]:
        registration = self._registry.resolve(adapter)
        rooted = request.with_root(registration.root_path)
        token = cancellation or CancellationToken()
        ctx = {"adapter": adapter, "operation": operation, **_describe(request)}

        self._log.debug("Adapter operation started", **ctx)
        t0 = time.perf_counter()
        try:
            result = await call(registration, rooted, token)
        except FilesystemError as exc:
            self._record(adapter, operation, exc.kind.value)
            self._log.error(
                "Adapter operation failed", kind=exc.kind.value, error=str(exc), **ctx
            )
            raise
        except Exception as exc:
            self._record(adapter, operation, "provider_operation")
            self._log.error(
                "Adapter raised an untranslated error",
                error_type=type(exc).__name__,
                error=str(exc),
                **ctx,
            )
            raise ProviderOperationError(
                adapter,
                f"Unexpected exception thrown by adapter '{adapter}' during {operation}. "
                "See inner exception for details.",
            ) from exc
        self._record(adapter, operation, "ok")
        self._log.info(
            "Adapter operation completed",
            elapsed_ms=round((time.perf_counter() - t0) * 1000, 2),
            **ctx,
        )
        return registration, result

    def _record(self, adapter: str, operation: str, outcome: str) -> None:
        self._metrics.counter(
            _COUNTER, tags={"adapter": adapter, "operation": operation, "outcome": outcome}
        )

    @staticmethod
    def _file_result(
        registration: AdapterRegistration, result: FileRepresentation
    ) -> AdapterAwareFileRepresentation:
        return AdapterAwareFileRepresentation(
            path=strip_root(registration.root_path, result.path),
            adapter=registration.name,
        )

    @staticmethod
    def _directory_result(
        registration: AdapterRegistration, result: DirectoryRepresentation
    ) -> AdapterAwareDirectoryRepresentation:
        return AdapterAwareDirectoryRepresentation(
            path=strip_root(registration.root_path, result.path),
            adapter=registration.name,
        )
