"""core/middleware.py — Request correlation and access logging for Eventmi.

RequestIDMiddleware gives every page load and form post an id that shows up
in the X-Request-ID header, in the JSON error bodies built by api/main.py and
in every log line written for the request.

AccessLogMiddleware writes one JSON access line per request. Health probes
are logged at DEBUG so load-balancer polling does not drown out the event
pages at INFO.
"""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_QUIET_PREFIXES = ("/health",)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Reuse the caller's X-Request-ID, or mint a UUID4 when there is none."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """One log line per request: method, path, status, duration, request id.

    Must sit inside RequestIDMiddleware so request.state.request_id is set.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        path = request.url.path
        level = logging.DEBUG if path.startswith(_QUIET_PREFIXES) else logging.INFO
        logger.log(
            level,
            "%s %s -> %s",
            request.method,
            path,
            response.status_code,
            extra={
                "request_id": getattr(request.state, "request_id", "-"),
                "status_code": response.status_code,
                "duration_ms": elapsed_ms,
            },
        )
        return response
