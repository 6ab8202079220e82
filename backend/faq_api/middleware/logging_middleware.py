"""Request/response logging middleware.

Each request gets an id (taken from ``X-Request-ID`` when the caller sends one)
that is bound into the structlog context, so service-level events logged while
handling the request carry it too, and echoed back on the response.
"""
import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def _route_template(request: Request) -> str:
    """``/faqs/{faq_id}`` rather than ``/faqs/17``; falls back to the raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.perf_counter()
        try:
            response = await call_next(request)
            elapsed_ms = round((time.perf_counter() - start) * 1000, 2)

            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                "request",
                method=request.method,
                route=_route_template(request),
                path=request.url.path,
                path_params=dict(request.path_params) or None,
                status=response.status_code,
                duration_ms=elapsed_ms,
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()
