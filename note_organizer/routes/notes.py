"""
Note Organizer: Notes Route Handlers
====================================

What:  CRUD over /notes and /notes/{title}.
How:   Each handler gets a fresh NoteService (one load, at most one save per
       request) and returns the result. Failures are raised as application
       exceptions and turned into status codes by the handlers in main.py.

Route Table:
    GET    /notes           200 note array
    POST   /notes           201 message     | 400 duplicate title
    GET    /notes/{title}   200 note        | 404 unknown title
    PUT    /notes/{title}   201 message     | 400 unknown title
    DELETE /notes/{title}   204 empty body  | 404 unknown title
    Any storage failure     500
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from note_organizer.exceptions import NotFoundError, UpdateTargetNotFoundError
from note_organizer.models.note import Note
from note_organizer.schemas.note import ErrorResponse, MessageResponse, NoteCreate, NoteUpdate
from note_organizer.services.note_service import NoteService
from note_organizer.storage import NoteStorage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])

_SERVER_ERROR = {500: {"description": "Notes file unavailable or not writable", "model": ErrorResponse}}


def get_note_service() -> NoteService:
    """FastAPI dependency: a service bound to the configured notes file."""
    return NoteService(NoteStorage())


@router.get(
    "/notes",
    response_model=List[Note],
    responses=_SERVER_ERROR,
    summary="List all notes",
)
async def list_notes(service: NoteService = Depends(get_note_service)) -> List[Note]:
    return await service.list_notes()


@router.post(
    "/notes",
    status_code=201,
    response_model=MessageResponse,
    responses={
        400: {"description": "A note with this title already exists", "model": ErrorResponse},
        **_SERVER_ERROR,
    },
    summary="Add a note",
)
async def create_note(
    payload: NoteCreate,
    service: NoteService = Depends(get_note_service),
) -> MessageResponse:
    """Titles are unique ignoring case; the timestamp is assigned by the server."""
    await service.create_note(payload.title, payload.body)
    return MessageResponse(message="Note added successfully!")


@router.get(
    "/notes/{title}",
    response_model=Note,
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
        **_SERVER_ERROR,
    },
    summary="Get a note by title",
)
async def get_note(title: str, service: NoteService = Depends(get_note_service)) -> Note:
    return await service.get_note(title)


@router.put(
    "/notes/{title}",
    status_code=201,
    response_model=MessageResponse,
    responses={
        400: {"description": "Note not found", "model": ErrorResponse},
        **_SERVER_ERROR,
    },
    summary="Replace the body of a note",
)
async def update_note(
    title: str,
    payload: NoteUpdate,
    service: NoteService = Depends(get_note_service),
) -> MessageResponse:
    """Only the body changes; title and time_added are kept."""
    try:
        await service.update_note(title, payload.body)
    except NotFoundError as e:
        raise UpdateTargetNotFoundError(e.title, context=e.context) from e
    return MessageResponse(message="Note updated successfully!")


@router.delete(
    "/notes/{title}",
    status_code=204,
    response_class=Response,
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
        **_SERVER_ERROR,
    },
    summary="Delete a note by title",
)
async def delete_note(title: str, service: NoteService = Depends(get_note_service)) -> Response:
    """Removes every note whose title matches ignoring case."""
    await service.delete_note(title)
    return Response(status_code=204)
