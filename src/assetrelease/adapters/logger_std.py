"""Standard logging adapter."""

import logging
import sys
from typing import Any

from ..ports.logger import LoggerPort

_LOGGER_NAME = "assetrelease"


class StdLoggerAdapter(LoggerPort):
    """Structured logging on top of the stdlib ``logging`` module.

    Extra fields are rendered as ``key=value`` pairs after the message.
    """

    def __init__(self, name: str = _LOGGER_NAME, level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
            self.logger.addHandler(handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def log_operation(
        self,
        op: str,
        key: str,
        durations: dict[str, float],
        **kwargs: Any,
    ) -> None:
        fields = {"op": op, "key": key}
        fields.update({f"{name}_s": round(value, 3) for name, value in durations.items()})
        fields.update(kwargs)
        self._log(logging.INFO, "Operation complete", fields)

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if not self.logger.isEnabledFor(level):
            return
        if fields:
            rendered = " ".join(f"{name}={value}" for name, value in fields.items())
            message = f"{message} {rendered}"
        self.logger.log(level, message)
