"""
Note Organizer: FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers.
Who:   uvicorn (`uvicorn note_organizer.main:app`) or `note-organizer serve`.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging                  │
    │                                                     │
    │  Routes:      /notes  /notes/{title}  /health       │
    │                                                     │
    │  Exception Handlers:                                │
    │   Duplicate→400 │ NotFound→404 │ Storage→500        │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create an empty notes file if configured and missing
    Shutdown:
    1. Log shutdown (no connections to release)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from note_organizer import __version__
from note_organizer.config import settings
from note_organizer.exceptions import (
    DuplicateTitleError,
    NoteOrganizerError,
    NotFoundError,
    StorageUnavailableError,
    StorageWriteError,
    UpdateTargetNotFoundError,
)
from note_organizer.logging_setup import setup_logging
from note_organizer.middleware.logging import RequestLoggingMiddleware
from note_organizer.middleware.request_id import RequestIDMiddleware, request_id_var
from note_organizer.routes import health, notes
from note_organizer.storage import NoteStorage

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: logging and notes file. Shutdown: log only."""
    setup_logging()
    logger.info("Note Organizer API starting up...")

    storage = NoteStorage()
    if settings.create_store_on_startup:
        try:
            await storage.initialize()
        except StorageWriteError as e:
            # Keep serving; requests will report the storage failure as 500
            logger.error("Could not create notes file: %s | Context: %s", e.message, e.context)
    logger.info("Notes file: %s", storage.path.resolve())

    logger.info(
        "Note Organizer API is listening on http://%s:%d",
        settings.server_host,
        settings.server_port,
    )

    yield

    logger.info("Note Organizer API shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "request_id": request_id_var.get(""),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler table:
        DuplicateTitleError        → 400 duplicate_title
        UpdateTargetNotFoundError  → 400 invalid_update_target
        NotFoundError              → 404 not_found
        StorageUnavailableError    → 500 storage_unavailable
        StorageWriteError          → 500 storage_write_error
        NoteOrganizerError (base)  → 500 server_error
        Exception (fallback)       → 500 internal_server_error

    Storage details (paths, OS errors) are logged, never returned.
    ValidationError has no handler: it is raised for blank menu input only;
    malformed request bodies are rejected by FastAPI with 422 first.
    """

    @app.exception_handler(DuplicateTitleError)
    async def handle_duplicate_title(request: Request, exc: DuplicateTitleError):
        return _error_response(400, "duplicate_title", exc.message)

    @app.exception_handler(UpdateTargetNotFoundError)
    async def handle_update_target_not_found(request: Request, exc: UpdateTargetNotFoundError):
        return _error_response(400, "invalid_update_target", exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(StorageUnavailableError)
    async def handle_storage_unavailable(request: Request, exc: StorageUnavailableError):
        logger.error(
            "Storage unavailable: %s | Context: %s",
            exc.message,
            exc.context,
        )
        return _error_response(500, "storage_unavailable", "Internal Server Error")

    @app.exception_handler(StorageWriteError)
    async def handle_storage_write_error(request: Request, exc: StorageWriteError):
        logger.error(
            "Storage write failed: %s | Context: %s",
            exc.message,
            exc.context,
        )
        return _error_response(500, "storage_write_error", "Internal Server Error")

    @app.exception_handler(NoteOrganizerError)
    async def handle_app_error(request: Request, exc: NoteOrganizerError):
        logger.error("%s: %s", type(exc).__name__, exc.message)
        return _error_response(500, "server_error", "Internal Server Error")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "Unexpected error: %s",
            str(exc),
            exc_info=True,
        )
        return _error_response(500, "internal_server_error", "Internal Server Error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Assemble middleware, exception handlers and routers."""
    app = FastAPI(
        title="Note Organizer API",
        description="Add, read, update, delete and list notes kept in a single JSON file.",
        version=__version__,
        lifespan=lifespan,
    )

    # Last added runs first: RequestID → Logging → route
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(notes.router)
    app.include_router(health.router)

    return app


def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Run the API with uvicorn (blocking)."""
    import uvicorn

    uvicorn.run(
        app,
        host=host or settings.server_host,
        port=port or settings.server_port,
        log_config=None,  # Keep our own logging setup
    )


app = create_app()
