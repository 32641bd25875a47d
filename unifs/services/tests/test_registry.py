import pytest

from unifs.services.registry import resolve_implementation


def test_resolve_memory_store():
    cls = resolve_implementation("fs", "memory")
    from unifs.services.object_store.memory_object_store import MemoryObjectStore

    assert cls is MemoryObjectStore


def test_resolve_local_adapter():
    cls = resolve_implementation("fs", "local")
    from unifs.services.adapter.local_adapter import LocalAdapter

    assert cls is LocalAdapter


def test_resolve_minio_store():
    pytest.importorskip("minio")
    cls = resolve_implementation("fs", "minio")
    from unifs.services.object_store.minio_object_store import MinioObjectStore

    assert cls is MinioObjectStore


def test_resolve_metrics():
    from unifs.services.metrics.memory_metrics import MemoryMetrics
    from unifs.services.metrics.noop_metrics import NoopMetrics

    assert resolve_implementation("metrics", "noop") is NoopMetrics
    assert resolve_implementation("metrics", "memory") is MemoryMetrics


def test_resolve_env_secrets():
    from unifs.services.secrets.env_secrets import EnvSecrets

    assert resolve_implementation("secrets", "env") is EnvSecrets


def test_unknown_flag_raises():
    with pytest.raises(ValueError, match="Unknown interface flag"):
        resolve_implementation("nonexistent", "memory")


def test_unknown_impl_raises():
    with pytest.raises(ValueError, match="available: memory, minio, local"):
        resolve_implementation("fs", "gcs")
