"""
Note Organizer: Note Service
============================

What:  The load → operate → save cycle behind every API request.
How:   Each method reads the whole collection from NoteStorage, applies one
       NoteRepository operation, and rewrites the file if anything changed.
Who:   Built per request by the get_note_service dependency in routes/notes.py.

Request Flow (PUT /notes/{title}):
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌──────────┐
    │  Route   │───▶│   load()    │───▶│  update()    │───▶│  save()  │
    │          │    │  (storage)  │    │ (repository) │    │ (storage)│
    └──────────┘    └─────────────┘    └──────────────┘    └──────────┘

    Nothing is cached between calls. Two overlapping requests can both read
    the same state and the later save wins.

Error Handling:
    Repository errors (DuplicateTitleError, NotFoundError) and storage errors
    (StorageUnavailableError, StorageWriteError) propagate unchanged to the
    global exception handlers.
"""

import logging
from typing import List

from note_organizer.exceptions import NotFoundError
from note_organizer.models.note import Note
from note_organizer.services.note_repository import NoteRepository, note_repository
from note_organizer.storage import NoteStorage

logger = logging.getLogger(__name__)


class NoteService:
    """
    Note operations bound to one notes file.

    Args:
        storage:    Accessor for the notes file
        repository: In-memory operations (defaults to the shared singleton)
    """

    def __init__(self, storage: NoteStorage, repository: NoteRepository = note_repository):
        self.storage = storage
        self.repository = repository

    async def list_notes(self) -> List[Note]:
        return await self.storage.load()

    async def get_note(self, title: str) -> Note:
        """
        Raises:
            NotFoundError: no note with this title (case-insensitive).
        """
        notes = await self.storage.load()
        note = self.repository.find_by_title(notes, title)
        if note is None:
            raise NotFoundError(title)
        return note

    async def create_note(self, title: str, body: str) -> Note:
        """
        Raises:
            DuplicateTitleError: the title already exists (case-insensitive).
        """
        notes = await self.storage.load()
        notes = self.repository.add(notes, title, body)
        await self.storage.save(notes)
        logger.info("Note added: '%s'", title)
        return notes[-1]

    async def update_note(self, title: str, body: str) -> Note:
        """
        Raises:
            NotFoundError: no note with this title.
        """
        notes = await self.storage.load()
        notes = self.repository.update(notes, title, body)
        await self.storage.save(notes)
        logger.info("Note updated: '%s'", title)
        return self.repository.find_by_title(notes, title)

    async def delete_note(self, title: str) -> None:
        """
        Raises:
            NotFoundError: no note with this title. The file is not written.
        """
        notes = await self.storage.load()
        notes = self.repository.delete(notes, title)
        await self.storage.save(notes)
        logger.info("Note deleted: '%s'", title)
