"""
Note Organizer: Custom Exception Hierarchy
==========================================

What:  Defines application-specific exceptions for the note operations.
How:   Each exception class carries a user-facing message and an optional
       context dict. Front ends catch these at their boundary: the HTTP app
       through global handlers registered in main.py, the CLI by printing
       the message.
Who:   Raised by the storage layer, the repository and the CLI prompts.

Exception Hierarchy:
    NoteOrganizerError (base)
    ├── ValidationError              → CLI only (blank menu input, re-prompted)
    ├── DuplicateTitleError          → 400 Bad Request
    ├── NotFoundError                → 404 Not Found
    │   └── UpdateTargetNotFoundError → 400 Bad Request (PUT on unknown title)
    ├── StorageUnavailableError      → 500 Internal Server Error
    └── StorageWriteError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NoteOrganizerError(Exception):
    """
    Base exception for all Note Organizer errors.

    Attributes:
        message:  User-facing error description (safe to print or return)
        context:  Additional debug info (logged, never returned to API clients)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteOrganizerError):
    """
    Raised when required input is missing or blank.

    When:    The CLI reads an empty title or body.
    HTTP:    not used; request bodies are checked by pydantic schemas (422)
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DuplicateTitleError(NoteOrganizerError):
    """
    Raised when adding a note whose title already exists (case-insensitive).

    HTTP:    400 Bad Request
    """

    def __init__(self, title: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["title"] = title
        super().__init__(message="Failed to add, title already exists.", context=ctx)
        self.title = title


class NotFoundError(NoteOrganizerError):
    """
    Raised when an operation targets a title that is not in the collection.

    When:    read, update or delete of an unknown title.
    HTTP:    404 Not Found
    """

    def __init__(self, title: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["title"] = title
        super().__init__(message="Note not found.", context=ctx)
        self.title = title


class UpdateTargetNotFoundError(NotFoundError):
    """
    Raised by PUT /notes/{title} when the title does not exist.

    HTTP:    400 Bad Request. The update route reports an unknown target as a
             bad request rather than a missing resource.
    """


class StorageUnavailableError(NoteOrganizerError):
    """
    Raised when the notes file cannot be loaded.

    When:    File missing, unreadable, not JSON, or not an array of notes.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Notes file not found.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StorageWriteError(NoteOrganizerError):
    """
    Raised when the notes file cannot be written.

    When:    Permission denied, disk full, parent directory missing.
    HTTP:    500 Internal Server Error

    The in-memory change is not persisted; nothing is rolled back because
    nothing reached the disk.
    """

    def __init__(
        self,
        message: str = "Failed to save notes.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
