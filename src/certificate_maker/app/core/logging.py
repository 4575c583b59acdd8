from __future__ import annotations

import json
import logging
import os
from logging.config import dictConfig
from traceback import format_exception
from typing import Any

from .env import Env, get_env, pick

DATEFMT = "%Y-%m-%dT%H:%M:%S"
PLAIN_FORMAT = "%(asctime)s %(levelname)-5s [pid:%(process)d] %(name)s: %(message)s"

# record attribute -> key under "http"
_HTTP_FIELDS = {"http_method": "method", "path": "path", "status_code": "status"}

# third-party loggers routed through the root handler, with their floor level
_LIBRARY_LEVELS = {
    "uvicorn": "INFO",
    "uvicorn.error": "INFO",
    "uvicorn.access": "INFO",
    "pymongo": "WARNING",
}


def _error_context(exc_info) -> dict[str, Any]:
    exc_type, exc_value, _ = exc_info
    stack = "".join(format_exception(*exc_info))
    limit = int(os.getenv("LOG_STACK_LIMIT", "4000"))
    if len(stack) > limit:
        stack = stack[:limit] + "...(truncated)"
    return {
        "type": exc_type.__name__ if exc_type else None,
        "message": str(exc_value) if exc_value else None,
        "stack": stack,
    }


class JsonFormatter(logging.Formatter):
    """Renders each record as a single JSON line.

    ``http_method``/``path``/``status_code`` and ``certificate_id`` passed via
    ``extra=`` are lifted into the payload when present.
    """

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "pid": record.process,
            "message": record.getMessage(),
        }
        http = {key: getattr(record, attr) for attr, key in _HTTP_FIELDS.items() if getattr(record, attr, None) is not None}
        if http:
            payload["http"] = http
        if getattr(record, "certificate_id", None) is not None:
            payload["certificate_id"] = record.certificate_id  # type: ignore[attr-defined]
        if record.exc_info:
            payload["error"] = _error_context(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def read_level(env: Env | None = None) -> str:
    return (os.getenv("LOG_LEVEL") or pick(prod="INFO", nonprod="DEBUG", env=env)).upper()


def read_format(env: Env | None = None) -> str:
    return (os.getenv("LOG_FORMAT") or pick(prod="json", nonprod="plain", env=env)).lower()


def logging_config(level: str, fmt: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": PLAIN_FORMAT, "datefmt": DATEFMT},
            "json": {"()": JsonFormatter, "datefmt": DATEFMT},
        },
        "handlers": {
            "stream": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "json" if fmt == "json" else "plain",
            }
        },
        "root": {"level": level, "handlers": ["stream"]},
        "loggers": {
            name: {"level": floor, "handlers": [], "propagate": True} for name, floor in _LIBRARY_LEVELS.items()
        },
    }


def setup_logging(env: Env | None = None) -> None:
    """Configure the root logger for ``env`` (default: APP_ENV).

    Prod logs JSON at INFO, everything else plain text at DEBUG; LOG_LEVEL and
    LOG_FORMAT override either choice.
    """
    env = env or get_env()
    dictConfig(logging_config(read_level(env), read_format(env)))
