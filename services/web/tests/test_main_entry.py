"""Startup confirmation from the uvicorn entrypoint."""

import asyncio
import logging
from pathlib import Path
import sys

import uvicorn

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from ssrdemo_web.__main__ import AppServer  # noqa: E402
from ssrdemo_web.main import app  # noqa: E402

ENTRY_LOGGER = "ssrdemo_web.__main__"


def _server() -> AppServer:
    return AppServer(uvicorn.Config(app, host="127.0.0.1", port=3000, log_config=None))


def _startup_lines(caplog) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == ENTRY_LOGGER]


def test_running_line_after_listener_bound(monkeypatch, caplog) -> None:
    async def bound(self, sockets=None):
        self.started = True

    monkeypatch.setattr(uvicorn.Server, "startup", bound)
    with caplog.at_level(logging.INFO):
        asyncio.run(_server().startup())
    assert _startup_lines(caplog) == ["app running at 'http://localhost:3000'"]


def test_no_running_line_when_startup_fails(monkeypatch, caplog) -> None:
    async def failed(self, sockets=None):
        self.should_exit = True

    monkeypatch.setattr(uvicorn.Server, "startup", failed)
    with caplog.at_level(logging.INFO):
        asyncio.run(_server().startup())
    assert _startup_lines(caplog) == []
