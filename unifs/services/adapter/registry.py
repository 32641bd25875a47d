"""Named adapters and their root paths.

The registry is filled once at startup and only read afterwards. The first
``resolve()`` freezes it; later ``register()`` calls raise
``RegistryFrozenError`` rather than racing with concurrent readers. Reads
take no lock.
"""

from __future__ import annotations

from dataclasses import dataclass

from unifs.core.errors import (
    AdapterAlreadyRegisteredError,
    AdapterNotFoundError,
    RegistryFrozenError,
)
from unifs.core.paths import Path
from unifs.services.adapter.interface import AdapterInterface

DEFAULT_ADAPTER = "default"


@dataclass(frozen=True)
class AdapterRegistration:
    name: str
    adapter: AdapterInterface
    root_path: Path | None = None


class AdapterRegistry:
    def __init__(self) -> None:
        self._registrations: dict[str, AdapterRegistration] = {}
        self._frozen = False

    def register(
        self,
        name: str,
        adapter: AdapterInterface,
        root_path: Path | None = None,
    ) -> AdapterRegistration:
        if name in self._registrations:
            raise AdapterAlreadyRegisteredError(name)
        if self._frozen:
            raise RegistryFrozenError(name)
        if root_path is not None and root_path.is_root:
            root_path = None
        registration = AdapterRegistration(name=name, adapter=adapter, root_path=root_path)
        self._registrations[name] = registration
        return registration

    def resolve(self, name: str = DEFAULT_ADAPTER) -> AdapterRegistration:
        self._frozen = True
        registration = self._registrations.get(name)
        if registration is None:
            raise AdapterNotFoundError(name, self.names)
        return registration

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def names(self) -> list[str]:
        return list(self._registrations)

    def __contains__(self, name: object) -> bool:
        return name in self._registrations

    def __len__(self) -> int:
        return len(self._registrations)
