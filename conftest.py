"""Root-level pytest fixtures: a testcontainer-backed MinIO server."""

from __future__ import annotations

import uuid

import pytest


@pytest.fixture(scope="session")
def minio_container():
    """Single MinIO container for the test session."""
    from testcontainers.minio import MinioContainer

    with MinioContainer() as minio:
        yield minio


@pytest.fixture
def minio_secrets(minio_container):
    """Secrets pointing the default MinIO driver at a fresh bucket."""
    from unifs.services.secrets.env_secrets import EnvSecrets

    config = minio_container.get_config()
    return EnvSecrets(
        overrides={
            "FS_MINIO_ENDPOINT": config["endpoint"],
            "FS_MINIO_ACCESS_KEY": config["access_key"],
            "FS_MINIO_SECRET_KEY": config["secret_key"],
            "FS_MINIO_BUCKET": f"unifs-{uuid.uuid4().hex[:12]}",
            "FS_MINIO_PAGE_SIZE": "2",
        }
    )
