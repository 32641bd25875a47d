from typing import Any

from unifs.services.logger.interface import LoggingInterface


class NoopLogger(LoggingInterface):
    """Discards everything. Default for library use so nothing is printed."""

    def info(self, msg: str, **ctx: Any) -> None:
        pass

    def warn(self, msg: str, **ctx: Any) -> None:
        pass

    def error(self, msg: str, **ctx: Any) -> None:
        pass

    def debug(self, msg: str, **ctx: Any) -> None:
        pass
