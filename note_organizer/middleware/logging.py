"""
Note Organizer: Access Log Middleware
=====================================

What:  One access line per HTTP request, naming the note operation it ran.
How:   After the route has run, the matched FastAPI route is read back from
       the request scope; its name is the operation (list_notes,
       create_note, get_note, update_note, delete_note) and the `title`
       path parameter, when present, is the note it touched.

    create_note POST /notes -> 201 (2.4ms)
    delete_note DELETE /notes/Groceries -> 404 (0.9ms) title='Groceries'

Log levels by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

The health check is not logged. Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("note_organizer.access")

UNMATCHED_OPERATION = "unmatched"
SKIPPED_OPERATIONS = {"health_check"}


def status_log_level(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def operation_name(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "name", None) or UNMATCHED_OPERATION


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        operation = operation_name(request)
        if operation in SKIPPED_OPERATIONS:
            return response

        title = request.path_params.get("title")
        message = "%s %s %s -> %d (%.1fms)"
        args = [operation, request.method, request.url.path, response.status_code, duration_ms]
        if title is not None:
            message += " title=%r"
            args.append(title)

        logger.log(
            status_log_level(response.status_code),
            message,
            *args,
            extra={
                "operation": operation,
                "note_title": title,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response
