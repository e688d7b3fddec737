"""Environment configuration helpers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", name, value, default)
        return default


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


@dataclass
class Settings:
    """Configuration settings loaded from the environment."""

    host: str = field(default_factory=lambda: _str_env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _int_env("PORT", 3000))
    name: str = field(default_factory=lambda: _str_env("HELLO_NAME", "Adele"))
    page_title: str = field(
        default_factory=lambda: _str_env("PAGE_TITLE", "React Server Side App")
    )
    metrics_log_interval: int = field(
        default_factory=lambda: _int_env("METRICS_LOG_INTERVAL", 60)
    )

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            logger.warning("PORT %s out of range, using 3000", self.port)
            self.port = 3000

    def reload(self) -> None:
        """Reload settings from the current environment."""
        new = type(self)()
        self.__dict__.update(vars(new))


settings = Settings()
