"""Builds an AdapterRegistry from configuration.

Each adapter is described by an ``AdapterConfig`` naming a driver from the
``fs`` section of the service registry. Object-store drivers are wrapped in
an ``ObjectStoreAdapter``; adapter drivers are used as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, get_type_hints

from unifs.core.paths import normalize
from unifs.services.adapter.interface import AdapterInterface
from unifs.services.adapter.object_store_adapter import ObjectStoreAdapter
from unifs.services.adapter.observable_adapter import ObservableAdapter
from unifs.services.adapter.pagination import DEFAULT_PAGE_SIZE
from unifs.services.adapter.registry import DEFAULT_ADAPTER, AdapterRegistry
from unifs.services.metrics.interface import MetricsInterface
from unifs.services.object_store.interface import ObjectStoreInterface
from unifs.services.registry import resolve_implementation
from unifs.services.secrets.interface import SecretsInterface

ADAPTERS_ENV = "UNIFS_ADAPTERS"


@dataclass
class AdapterConfig:
    """Deferred construction config for a named adapter."""

    name: str
    driver: str
    root: str | None = None
    prefix: str | None = None

    @property
    def secrets_prefix(self) -> str:
        """``FS_<DRIVER>`` for the default adapter, ``FS_<NAME>`` otherwise."""
        if self.prefix:
            return self.prefix
        if self.name == DEFAULT_ADAPTER:
            return f"FS_{self.driver.upper()}"
        return f"FS_{self.name.upper()}"

    def create(self, secrets: SecretsInterface) -> AdapterInterface:
        impl_cls = resolve_implementation("fs", self.driver)
        prefix = self.secrets_prefix
        if "secrets" in _get_init_hints(impl_cls):
            impl = impl_cls(secrets=secrets, prefix=prefix)
        else:
            impl = impl_cls()
        if isinstance(impl, ObjectStoreInterface):
            page_size = int(
                secrets.get_or_default(f"{prefix}_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
            )
            return ObjectStoreAdapter(impl, page_size=page_size)
        return impl


def parse_adapter_entries(
    entries: list[str], roots: dict[str, str] | None = None
) -> list[AdapterConfig]:
    """Parse ``name=driver`` entries.

    Supports:
      memory           -> name="default", driver="memory"
      archive=minio    -> name="archive", driver="minio"
    """
    roots = roots or {}
    configs: list[AdapterConfig] = []
    for entry in entries:
        entry = entry.strip()
        if not entry:
            continue
        if "=" in entry:
            name, driver = (part.strip() for part in entry.split("=", 1))
        else:
            name, driver = DEFAULT_ADAPTER, entry
        if not name or not driver:
            raise ValueError(f"Invalid adapter entry: '{entry}' (expected name=driver)")
        configs.append(AdapterConfig(name=name, driver=driver, root=roots.get(name)))
    return configs


def configs_from_env(secrets: SecretsInterface) -> list[AdapterConfig]:
    """Read ``UNIFS_ADAPTERS`` and ``UNIFS_ADAPTER_<NAME>_ROOT``."""
    raw = secrets.get_or_default(ADAPTERS_ENV, "")
    configs = parse_adapter_entries(raw.split(","))
    for config in configs:
        root = secrets.get(f"UNIFS_ADAPTER_{config.name.upper()}_ROOT")
        if root:
            config.root = root
    return configs


def build_registry(
    configs: list[AdapterConfig],
    secrets: SecretsInterface,
    metrics: MetricsInterface | None = None,
) -> AdapterRegistry:
    """Create every configured adapter and register it under its name."""
    registry = AdapterRegistry()
    for config in configs:
        adapter = config.create(secrets)
        if metrics is not None:
            adapter = ObservableAdapter(adapter, metrics, label=config.name)
        root = normalize(config.root) if config.root else None
        registry.register(config.name, adapter, root)
    if metrics is not None:
        metrics.gauge("registered_adapters", len(registry))
    return registry


def _get_init_hints(cls: type) -> dict[str, Any]:
    """Get type hints for cls.__init__, returning empty dict on failure."""
    try:
        hints = get_type_hints(cls.__init__)
        hints.pop("return", None)
        return hints
    except Exception:
        return {}
