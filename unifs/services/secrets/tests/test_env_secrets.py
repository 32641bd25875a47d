import pytest

from unifs.services.secrets.env_secrets import EnvSecrets


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("FS_MINIO_BUCKET", "from-env")
    assert EnvSecrets().get("FS_MINIO_BUCKET") == "from-env"


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("FS_MINIO_BUCKET", "from-env")
    secrets = EnvSecrets(overrides={"FS_MINIO_BUCKET": "override"})
    assert secrets.get("FS_MINIO_BUCKET") == "override"


def test_get_missing_returns_none():
    assert EnvSecrets().get("UNIFS_DEFINITELY_NOT_SET") is None


def test_get_or_default():
    secrets = EnvSecrets(overrides={"A": "1"})
    assert secrets.get_or_default("A", "x") == "1"
    assert secrets.get_or_default("UNIFS_DEFINITELY_NOT_SET", "x") == "x"


def test_require_raises_when_missing():
    with pytest.raises(KeyError, match="UNIFS_DEFINITELY_NOT_SET"):
        EnvSecrets().require("UNIFS_DEFINITELY_NOT_SET")
