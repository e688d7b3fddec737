"""Run the web service with ``python -m ssrdemo_web``."""

from __future__ import annotations

import logging

import uvicorn

from .config import settings
from .main import app

logger = logging.getLogger(__name__)


class AppServer(uvicorn.Server):
    """Uvicorn server that confirms startup once the listener is bound."""

    async def startup(self, sockets=None) -> None:  # type: ignore[override]
        await super().startup(sockets=sockets)
        if self.started and not self.should_exit:
            logger.info(
                "app running at 'http://localhost:%s'",
                self.config.port,
                extra={"host": self.config.host, "port": self.config.port},
            )


def main() -> None:
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        loop="asyncio",
        http="h11",
        access_log=False,
        log_config=None,
    )
    AppServer(config).run()


if __name__ == "__main__":  # pragma: no cover - convenience for manual runs
    main()
