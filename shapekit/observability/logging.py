from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from shapekit.shapes.base import Shape

# Attributes every LogRecord carries; anything else came in through `extra={...}`.
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "asctime",
    }
)


def _json_default(obj: object) -> str:
    # Shapes log as their canonical string form; anything else as repr().
    if isinstance(obj, Shape):
        return obj.to_string()
    return repr(obj)


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Key order is fixed: `ts`, `level`, `logger`, `message`, then fields passed
    through `extra={...}` sorted by name, then `exc_info` when present.
    """

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extras = {
            k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS and not k.startswith("_")
        }
        for k in sorted(extras):
            payload[k] = extras[k]

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=_json_default)


def configure_logging(*, level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure the `shapekit` logger hierarchy with JSON output.

    Only the package logger is touched so applications embedding the library keep
    their own root configuration. Calling this again replaces the handler.
    """

    pkg = logging.getLogger("shapekit")
    pkg.setLevel(level.upper())

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(JsonFormatter())

    pkg.handlers.clear()
    pkg.addHandler(handler)
    pkg.propagate = False
