from abc import ABC, abstractmethod


class SecretsInterface(ABC):
    """Key/value source for driver settings and credentials.

    Drivers read namespaced keys such as ``FS_MINIO_ENDPOINT`` or
    ``FS_ARCHIVE_ROOT``; see ``AdapterConfig.secrets_prefix``.
    """

    @abstractmethod
    def get(self, key: str) -> str | None: ...

    @abstractmethod
    def get_or_default(self, key: str, default: str) -> str: ...

    @abstractmethod
    def require(self, key: str) -> str:
        """Like ``get`` but raises ``KeyError`` when *key* is unset."""
