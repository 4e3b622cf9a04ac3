"""
Note Organizer: Health Check Route
==================================

What:  Reports whether the notes file can be read.
How:   Loads the collection once and reports its size.

Status levels:
    - healthy:   notes file loads (HTTP 200)
    - unhealthy: notes file missing or corrupted (HTTP 200, flagged in body)
"""

import logging
import time

from fastapi import APIRouter, Depends

from note_organizer import __version__
from note_organizer.exceptions import StorageUnavailableError
from note_organizer.routes.notes import get_note_service
from note_organizer.schemas.note import HealthResponse
from note_organizer.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(service: NoteService = Depends(get_note_service)) -> HealthResponse:
    storage_status = "available"
    note_count = None

    try:
        note_count = len(await service.list_notes())
    except StorageUnavailableError as e:
        storage_status = "corrupted" if service.storage.exists() else "missing"
        logger.warning("Health check: notes file unavailable: %s", e.message)

    return HealthResponse(
        status="healthy" if storage_status == "available" else "unhealthy",
        version=__version__,
        storage=storage_status,
        note_count=note_count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
