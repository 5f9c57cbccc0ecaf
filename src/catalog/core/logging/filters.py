# src/catalog/core/logging/filters.py
"""
Logging filters.

`RequestIdFilter` stamps every LogRecord with a `request_id` taken from a
contextvar, so formatters that reference `%(request_id)s` never fail and lines
from one HTTP request can be correlated. A contextvar (not a thread local) is
used because one thread serves many requests across awaits.

The request id is set per request by `RequestIDMiddleware`:

    token = set_request_id(rid)
    try:
        ...
    finally:
        reset_request_id(token)

`RedactFilter` masks record attributes whose names look sensitive (passed via
`extra=`) before any handler formats them.
"""

import logging
from logging import LogRecord
import contextvars

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)

REDACTED = "***REDACTED***"


def set_request_id(request_id: str | None):
    """
    Set the request id in the current context.

    Returns:
        token: pass it to reset_request_id(token) to restore the previous value
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token):
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    """Current context's request id, or None outside a request."""
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantee every LogRecord has a `request_id` attribute.

    Precedence: a value passed via `extra={"request_id": ...}`, then the
    contextvar, then the sentinel "-". Never drops a record.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    """Mask sensitive attributes, including keys of dict-valued extras."""

    SENSITIVE = {
        "password", "secret", "token", "access_token", "refresh_token",
        "authorization", "api_key", "email",
    }

    def filter(self, record: LogRecord) -> bool:
        for key, value in list(record.__dict__.items()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = REDACTED
            elif isinstance(value, dict):
                record.__dict__[key] = {
                    k: (REDACTED if str(k).lower() in self.SENSITIVE else v)
                    for k, v in value.items()
                }
        return True
