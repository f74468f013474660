"""Process-wide logging configuration for the catalog layer."""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Iterator


LOG_LEVEL_ENV_VAR = "SAMPURNAN_LOG_LEVEL"
CAPTURE_WARNINGS_ENV_VAR = "SAMPURNAN_CAPTURE_WARNINGS"

_LOG_CONTEXT: ContextVar[Dict[str, Any]] = ContextVar("sampurnan_log_context", default={})


class ContextFilter(logging.Filter):
    """Attach fields bound with :func:`log_context` to every record."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - inherited docstring
        context = _LOG_CONTEXT.get()
        if context:
            record.log_context = context
            for key, value in context.items():
                if not hasattr(record, key):
                    setattr(record, key, value)
        if getattr(record, "service", None) is None:
            record.service = self.service_name
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with contextual and ``extra`` fields merged in."""

    _RESERVED = {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "log_context",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - inherited docstring
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in self._RESERVED or key in payload or key.startswith("_"):
                continue
            if value is None:
                continue
            payload[key] = value if self._is_json_safe(value) else repr(value)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)
        return json.dumps(payload, ensure_ascii=False)

    @staticmethod
    def _is_json_safe(value: Any) -> bool:
        try:
            json.dumps(value)
        except (TypeError, ValueError):
            return False
        return True


def setup_logging(
    service_name: str,
    level: str | int | None = None,
    *,
    capture_warnings: bool | None = None,
) -> None:
    """Configure JSON logging on stdout for the current process.

    ``level`` falls back to ``SAMPURNAN_LOG_LEVEL`` and then ``INFO``. Calling
    this again replaces the handler configuration, so it is safe to call from
    both application start-up and test fixtures.
    """

    resolved_level = level or os.getenv(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(resolved_level, str):
        resolved_level = resolved_level.upper()

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": "sampurnan_observability.logging.JsonFormatter"},
        },
        "filters": {
            "context": {
                "()": "sampurnan_observability.logging.ContextFilter",
                "service_name": service_name,
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": "json",
                "filters": ["context"],
            }
        },
        "root": {"level": resolved_level, "handlers": ["default"]},
        "loggers": {
            # httpx logs every request line at INFO; keep store traffic quiet.
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
    }
    logging.config.dictConfig(config)

    if capture_warnings is None:
        capture_env = os.getenv(CAPTURE_WARNINGS_ENV_VAR)
        capture = capture_env.lower() in {"1", "true", "t", "yes", "y"} if capture_env else False
    else:
        capture = capture_warnings
    logging.captureWarnings(capture)


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Temporarily bind fields (table, operation, provider...) to emitted logs."""

    updated = dict(_LOG_CONTEXT.get())
    for key, value in kwargs.items():
        if value is None:
            updated.pop(key, None)
        else:
            updated[key] = value
    token = _LOG_CONTEXT.set(updated)
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def current_log_context() -> Dict[str, Any]:
    return dict(_LOG_CONTEXT.get())
