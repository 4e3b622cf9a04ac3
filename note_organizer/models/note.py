"""
Note Organizer: Note Record
===========================

What:  The fixed-shape record persisted in the notes file.
How:   A pydantic model; the file is a JSON array of these objects.

Stored shape:
    {"title": "Groceries", "body": "Milk, eggs", "time_added": "2024-01-15T12:00:00.000Z"}

    Field order is title, body, time_added. The listing and the on-disk
    objects both follow it.
"""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, TypeAdapter


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Note(BaseModel):
    """
    A single note.

    Lifecycle:
        1. Created by "add" with the caller's title and body; time_added = now
        2. "update" replaces body only
        3. "delete" removes it from the collection

    Title uniqueness (case-insensitive) is a collection invariant checked by
    NoteRepository.add, not by this model.
    """

    title: str = Field(description="Case-insensitive unique key")
    body: str = Field(description="Free text")
    # Required: a stored note without it is a corrupt file, not a new note
    time_added: datetime = Field(description="When the note was created (UTC ISO 8601)")

    model_config = {"validate_assignment": True}

    def __repr__(self) -> str:
        return f"<Note(title='{self.title}', time_added='{self.time_added}')>"


# What: Validator/serializer for the whole collection (a JSON array of notes)
NoteCollection = TypeAdapter(List[Note])
