"""Logging configuration.

Library modules only call `get_logger()`; handlers are installed once by
`configure_logging()`, which the MCP server entrypoint calls from settings.

Records may carry structured context through `extra=`. Only the keys in
`CONTEXT_FIELDS` are emitted by the JSON formatter.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

# `extra=` keys that techsvg attaches to its records
CONTEXT_FIELDS = ("tool", "scene", "width", "height", "transport")


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: level, logger, message and known context."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_FIELDS:
            if key in record.__dict__:
                payload[key] = record.__dict__[key]

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(*, level: str = "INFO", json_logs: bool = False) -> None:
    """Install a stderr handler on the root logger unless one exists.

    stderr keeps stdout free for the stdio MCP transport.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        JsonLogFormatter()
        if json_logs
        else logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
    root.addHandler(handler)
    root.setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
