"""
Note Organizer: Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the HTTP API contract.
How:   FastAPI validates request bodies against these models, serializes
       responses, and builds the OpenAPI docs from them.

Notes themselves are returned as the stored record (models.note.Note), so
the API and the file share one shape.
"""

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models: What clients send
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /notes."""
    title: str = Field(min_length=1, description="Title of the new note (case-insensitive unique)")
    body: str = Field(description="Note text")


class NoteUpdate(BaseModel):
    """Body of PUT /notes/{title}. Only the body of a note can change."""
    body: str = Field(description="Replacement note text")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Confirmation returned by POST and PUT."""
    message: str = Field(description="Human-readable result")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "duplicate_title",
            "message": "Failed to add, title already exists.",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: str | None = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Service status returned by GET /health."""
    status: str = Field(description="Overall status: healthy or unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Notes file state: available, missing, corrupted")
    note_count: int | None = Field(default=None, description="Notes in the file, when readable")
    uptime_seconds: float = Field(description="Seconds since the service started")
