# src/catalog/core/logging/middleware.py
"""
Request ID middleware for FastAPI / Starlette.

Each request gets an id: the incoming `X-Request-ID` header when it is a valid
UUID, a fresh UUID4 otherwise. The id is stored in the request-id contextvar
for the duration of the request (so RequestIdFilter can stamp log records) and
echoed back in the `X-Request-ID` response header.

Register it before the routers:

    app.add_middleware(RequestIDMiddleware)
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from .filters import set_request_id, reset_request_id

REQUEST_ID_HEADER = "X-Request-ID"

logger = logging.getLogger(__name__)


def _resolve_request_id(incoming: str | None) -> str:
    # Untrusted header: only accept UUID-shaped values
    if incoming:
        try:
            return str(uuid.UUID(incoming))
        except ValueError:
            logger.debug("http.request_id.rejected", extra={"incoming": incoming[:64]})
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Sets a request id for each incoming request and logs one line per response.
    """

    async def dispatch(self, request: Request, call_next):
        rid = _resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = set_request_id(rid)
        start = time.perf_counter()

        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = rid

            logger.info(
                "http.request.completed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": int((time.perf_counter() - start) * 1000),
                },
            )
            return response

        finally:
            reset_request_id(token)
