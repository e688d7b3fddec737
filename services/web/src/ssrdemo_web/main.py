"""Web service entrypoint using Starlette."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.responses import HTMLResponse
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from . import metrics_log
from .components import hello_world
from .config import settings
from .elements import h
from .logging import install_thread_excepthook, setup_logging
from .middleware_logger import RequestLoggerMiddleware
from .page import render_page
from .render import render_to_string

setup_logging()
install_thread_excepthook()

# Rendered once, before the server accepts connections.
MARKUP = render_to_string(h(hello_world, {"name": settings.name}))
PAGE = render_page(MARKUP, title=settings.page_title)


class PageResponder:
    """ASGI endpoint answering every method and path with the same page."""

    __slots__ = ("body",)

    def __init__(self, body: str) -> None:
        self.body = body

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = HTMLResponse(self.body, status_code=200)
        await response(scope, receive, send)


@asynccontextmanager
async def lifespan(app: Starlette) -> AsyncIterator[None]:
    stop_metrics = metrics_log.start(settings.metrics_log_interval)
    try:
        yield
    finally:
        stop_metrics()


routes = [
    # A non-function endpoint is mounted as a raw ASGI app and matches any method.
    Route("/{path:path}", PageResponder(PAGE)),
]
middleware = [
    Middleware(RequestLoggerMiddleware),
]

app = Starlette(routes=routes, middleware=middleware, lifespan=lifespan)
