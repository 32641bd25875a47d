"""Central registry mapping (interface_name, impl_name) to concrete class paths.

Uses string paths for lazy imports: importing the registry doesn't pull in
heavy libraries (minio, prometheus_client) unless that implementation is
selected.
"""

import importlib
from typing import Any

REGISTRY: dict[str, dict[str, str]] = {
    "fs": {
        "memory": "unifs.services.object_store.memory_object_store.MemoryObjectStore",
        "minio": "unifs.services.object_store.minio_object_store.MinioObjectStore",
        "local": "unifs.services.adapter.local_adapter.LocalAdapter",
    },
    "metrics": {
        "noop": "unifs.services.metrics.noop_metrics.NoopMetrics",
        "memory": "unifs.services.metrics.memory_metrics.MemoryMetrics",
        "prometheus": "unifs.services.metrics.prometheus_metrics.PrometheusMetrics",
    },
    "secrets": {
        "env": "unifs.services.secrets.env_secrets.EnvSecrets",
    },
}


def resolve_class(dotted_path: str) -> type[Any]:
    """Import and return a class from a dotted module.ClassName path."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)


def resolve_implementation(flag_name: str, impl_name: str) -> type[Any]:
    """Look up the concrete class for a given flag and implementation name."""
    impls = REGISTRY.get(flag_name)
    if impls is None:
        raise ValueError(f"Unknown interface flag: --{flag_name}")
    dotted = impls.get(impl_name)
    if dotted is None:
        available = ", ".join(impls.keys())
        raise ValueError(
            f"Unknown implementation '{impl_name}' for --{flag_name} "
            f"(available: {available})"
        )
    return resolve_class(dotted)
