from __future__ import annotations

import os

from unifs.services.secrets.interface import SecretsInterface


class EnvSecrets(SecretsInterface):
    """Process environment snapshot, layered under explicit overrides.

    The CLI passes ``--env`` / ``--env-file`` values as *overrides*; tests
    use them to point drivers at temporary roots or containers.
    """

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._values = {**os.environ, **(overrides or {})}

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def get_or_default(self, key: str, default: str) -> str:
        return self._values.get(key, default)

    def require(self, key: str) -> str:
        if key not in self._values:
            raise KeyError(f"Required setting '{key}' is not set")
        return self._values[key]
