"""Logging utilities for the web service."""

from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Any, Dict

import orjson

# Cache the standard LogRecord fields once so that formatters can
# efficiently filter out extra attributes on each log call. ``message`` and
# ``asctime`` are set by Formatter.format, ``color_message`` by uvicorn.
_LOG_RECORD_DEFAULTS = set(
    logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None
    ).__dict__
) | {"message", "asctime", "color_message"}

logger = logging.getLogger(__name__)


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        k: v for k, v in record.__dict__.items() if k not in _LOG_RECORD_DEFAULTS
    }


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%SZ"),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
        }
        payload.update(_extras(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode()


class PlainFormatter(logging.Formatter):
    """Plain formatter that appends extra fields."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        base = super().format(record)
        extras = [f"{k}={v}" for k, v in _extras(record).items()]
        if extras:
            if record.exc_info:
                first, *rest = base.splitlines()
                base = " ".join([first, " ".join(extras)])
                if rest:
                    base += "\n" + "\n".join(rest)
            else:
                base = " ".join([base, " ".join(extras)])
        return base


_LOG_LOCK = threading.Lock()


def setup_logging() -> None:
    """Configure the root logger to write to stdout."""
    root = logging.getLogger()
    if getattr(root, "_ssrdemo_logging_configured", False):
        return
    with _LOG_LOCK:
        if getattr(root, "_ssrdemo_logging_configured", False):
            return

        handler = logging.StreamHandler(sys.stdout)
        log_format = os.getenv("LOG_FORMAT", "plain")
        if log_format.lower() == "json":
            handler.setFormatter(JsonFormatter())
        else:
            handler.setFormatter(
                PlainFormatter("%(asctime)s %(levelname)s %(message)s")
            )

        root.handlers.clear()
        root.addHandler(handler)
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        root.setLevel(getattr(logging, level, logging.INFO))

        # Forward uvicorn's access logs through the same handler without propagating.
        access = logging.getLogger("uvicorn.access")
        access.handlers.clear()
        access.propagate = False
        access.addHandler(handler)

        root._ssrdemo_logging_configured = True


def _thread_excepthook(args: threading.ExceptHookArgs) -> None:
    """Log uncaught thread exceptions consistently."""
    name = args.thread.name if args.thread else ""
    logger.error(
        "thread_uncaught_exception",
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        extra={"thread_name": name},
    )


def install_thread_excepthook() -> None:
    threading.excepthook = _thread_excepthook
