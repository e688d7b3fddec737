import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .metrics_log import inc_requests, inc_server_errors


logger = logging.getLogger(__name__)


def request_target(request: Request) -> str:
    """Path plus query string, as sent in the request line."""
    path = request.url.path
    query = request.url.query
    return f"{path}?{query}" if query else path


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Write one line per request, then hand over to the next handler."""

    __slots__ = ()

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        target = request_target(request)
        logger.info(
            "%s request for '%s'",
            request.method,
            target,
            extra={"method": request.method, "path": target},
        )
        inc_requests()
        try:
            response = await call_next(request)
        except Exception:
            # Starlette's ServerErrorMiddleware turns this into the 500 response.
            inc_server_errors()
            raise
        if response.status_code >= 500:
            inc_server_errors()
        return response
