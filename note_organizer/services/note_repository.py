"""
Note Organizer: Note Repository
===============================

What:  In-memory operations over a loaded note collection, keyed by title.
How:   Linear scans with case-insensitive title comparison.
Who:   Called by NoteService (HTTP) and NoteMenu (CLI). Callers load the
       collection before and persist it after; nothing here touches disk.

Title matching:
    Titles compare with str.lower() on both sides, so "Groceries",
    "groceries" and "GROCERIES" are the same key.

    find_by_title/add/update act on the FIRST match. delete removes EVERY
    match, so a collection that somehow holds duplicates is fully cleaned
    by a single delete.
"""

import logging
from typing import List, Optional

from note_organizer.exceptions import DuplicateTitleError, NotFoundError
from note_organizer.models.note import Note, utc_now

logger = logging.getLogger(__name__)


def titles_match(a: str, b: str) -> bool:
    return a.lower() == b.lower()


class NoteRepository:
    """Title-keyed lookup, insert, delete and update on a list of notes."""

    def find_by_title(self, notes: List[Note], title: str) -> Optional[Note]:
        """Return the first note whose title matches, or None."""
        return next((note for note in notes if titles_match(note.title, title)), None)

    def add(self, notes: List[Note], title: str, body: str) -> List[Note]:
        """
        Append a new note stamped with the current time.

        The list is extended in place and returned.

        Raises:
            DuplicateTitleError: a note with the same title already exists.
        """
        if self.find_by_title(notes, title) is not None:
            raise DuplicateTitleError(title)

        notes.append(Note(title=title, body=body, time_added=utc_now()))
        return notes

    def delete(self, notes: List[Note], title: str) -> List[Note]:
        """
        Return a new list without any note whose title matches.

        Raises:
            NotFoundError: no note matches.
        """
        if self.find_by_title(notes, title) is None:
            raise NotFoundError(title)

        remaining = [note for note in notes if not titles_match(note.title, title)]
        removed = len(notes) - len(remaining)
        if removed > 1:
            logger.warning("Removed %d notes sharing the title '%s'", removed, title)
        return remaining

    def update(self, notes: List[Note], title: str, body: str) -> List[Note]:
        """
        Replace the body of the matching note in place.

        Title and time_added are left untouched.

        Raises:
            NotFoundError: no note matches.
        """
        note = self.find_by_title(notes, title)
        if note is None:
            raise NotFoundError(title)

        note.body = body
        return notes


note_repository = NoteRepository()
