"""
Note Organizer: Request ID Middleware
=====================================

What:  Tags each HTTP request with an ID and makes it visible on every log
       line written while the request is handled.
How:   RequestIDMiddleware stores the ID in a ContextVar and echoes it in the
       X-Request-ID header. RequestIDLogFilter copies the ContextVar onto
       each log record as `request_id`, so storage and service log lines
       carry the same ID as the access line and the error body.

Client IDs:
    Accepted when they are 1-64 characters of [A-Za-z0-9._-]. Anything else
    is replaced by a generated 8-hex-digit ID, so log lines cannot be forged
    or broken up through the header.
"""

import logging
import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
NO_REQUEST_ID = "-"

_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def resolve_request_id(candidate: Optional[str]) -> str:
    """Return the client's ID when it is well-formed, else a new one."""
    if candidate and _VALID_REQUEST_ID.fullmatch(candidate):
        return candidate
    return uuid.uuid4().hex[:8]


class RequestIDLogFilter(logging.Filter):
    """Adds `request_id` to every record ("-" outside a request, e.g. the CLI)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or NO_REQUEST_ID
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(request_id)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
