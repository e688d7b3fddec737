"""Request counters written to the log on a fixed interval."""

from __future__ import annotations

import logging
import threading
from collections import Counter
from typing import Callable

logger = logging.getLogger(__name__)

REQUESTS = "requests_total"
SERVER_ERRORS = "server_errors_total"

_counters: Counter[str] = Counter()
_logged: dict[str, int] = {}


def inc(name: str, *, value: int = 1) -> None:
    _counters[name] += value


def get_counters() -> dict[str, int]:
    return dict(_counters)


def reset() -> None:
    _counters.clear()
    _logged.clear()


def changed_counters() -> dict[str, int]:
    """Counters whose value moved since they were last logged."""
    current = get_counters()
    return {k: v for k, v in current.items() if _logged.get(k) != v}


def emit_metrics() -> None:
    changed = changed_counters()
    for name, value in sorted(changed.items()):
        logger.info(
            "Metric %s=%s",
            name,
            value,
            extra={"event": "metric", "metric": name, "value": value},
        )
    _logged.update(changed)


def start(interval: int) -> Callable[[], None]:
    """Log changed counters every ``interval`` seconds; returns a stop callback.

    A non-positive interval disables the logger.
    """
    if interval <= 0:
        return lambda: None
    stop = threading.Event()

    def run() -> None:
        while not stop.wait(interval):
            emit_metrics()
        # Flush whatever moved since the last tick.
        emit_metrics()

    thread = threading.Thread(target=run, daemon=True, name="metrics-log")
    thread.start()
    return stop.set


def inc_requests() -> None:
    inc(REQUESTS)


def inc_server_errors() -> None:
    inc(SERVER_ERRORS)
