from abc import ABC, abstractmethod
from typing import Any


class LoggingInterface(ABC):
    """Structured logger used by managers and the CLI.

    Each call takes a message plus keyword context; managers pass
    ``adapter``, ``operation`` and the request paths.
    """

    @abstractmethod
    def info(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def warn(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def error(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def debug(self, msg: str, **ctx: Any) -> None: ...
