# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Structured logging for clients, agents and servers.

Two output modes share one interface:

- ``json``: one JSON object per line (``message``, ``severity``,
  ``timestamp`` plus any data fields), suited to log collectors.
- ``text``: ``<timestamp> [SEVERITY] message`` followed by the data as
  indented JSON, suited to a terminal.

Everything is written to stderr. Agents served over MCP stdio use stdout for
protocol traffic, so log output must never go there.

Loggers are constructed explicitly and passed to the objects that use them.
With debug disabled only errors are emitted.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import IO, TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..config.settings import Settings


def _timestamp(created: float) -> str:
    return datetime.fromtimestamp(created, tz=timezone.utc).isoformat(timespec="milliseconds")


class JsonFormatter(logging.Formatter):
    """Render a record as a single structured JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "message": record.getMessage(),
            "severity": record.levelname,
            "timestamp": _timestamp(record.created),
        }
        payload.update(getattr(record, "data", None) or {})
        return json.dumps(payload, default=str)


class HumanFormatter(logging.Formatter):
    """Render a record as a readable line with optional indented data."""

    def format(self, record: logging.LogRecord) -> str:
        line = f"{_timestamp(record.created)} [{record.levelname}] {record.getMessage()}"
        data = getattr(record, "data", None)
        if data:
            line += "\n" + json.dumps(data, indent=2, default=str)
        return line


class StructuredLogger:
    """Logger with message + data calls and a switchable debug mode."""

    def __init__(
        self,
        name: str = "scope3_agentic",
        *,
        json_output: bool = True,
        debug: bool = False,
        stream: Optional[IO[str]] = None,
    ):
        """Initialize the logger.

        Args:
            name: Logger name shown in records
            json_output: Emit structured JSON (True) or human-readable text
            debug: Emit debug/info/warning records as well as errors
            stream: Output stream, defaults to stderr
        """
        self.json_output = json_output
        # Not registered with logging.getLogger: every instance owns its handler
        self._logger = logging.Logger(name)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(JsonFormatter() if json_output else HumanFormatter())
        self._logger.addHandler(handler)
        self._debug = False
        self.set_debug(debug)

    @property
    def debug_enabled(self) -> bool:
        return self._debug

    def set_debug(self, enabled: bool) -> None:
        """Toggle emission of non-error records."""
        self._debug = enabled
        self._logger.setLevel(logging.DEBUG if enabled else logging.ERROR)

    def debug(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        self._log(logging.DEBUG, message, data)

    def info(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        self._log(logging.INFO, message, data)

    def warn(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        self._log(logging.WARNING, message, data)

    warning = warn

    def error(
        self,
        message: str,
        error: Any = None,
        data: Optional[dict[str, Any]] = None,
    ) -> None:
        """Log an error, expanding exceptions into message/name/stack."""
        error_data: dict[str, Any] = dict(data or {})
        if isinstance(error, BaseException):
            error_data["error"] = {
                "message": str(error),
                "name": type(error).__name__,
                "stack": "".join(
                    traceback.format_exception(type(error), error, error.__traceback__)
                ),
            }
        elif error is not None:
            error_data["error"] = str(error)
        self._log(logging.ERROR, message, error_data)

    def _log(self, level: int, message: str, data: Optional[dict[str, Any]]) -> None:
        self._logger.log(level, message, extra={"data": data or {}})


def get_logger(
    settings: Optional["Settings"] = None,
    name: str = "scope3_agentic",
    stream: Optional[IO[str]] = None,
) -> StructuredLogger:
    """Build a logger from application settings.

    Args:
        settings: Settings to read log format and debug flag from
        name: Logger name
        stream: Output stream, defaults to stderr

    Returns:
        Configured StructuredLogger
    """
    if settings is None:
        from ..config.settings import get_settings

        settings = get_settings()

    return StructuredLogger(
        name,
        json_output=settings.resolved_log_format() == "json",
        debug=settings.scope3_debug,
        stream=stream,
    )
