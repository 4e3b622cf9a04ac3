"""
Note Organizer: Note Formatting
===============================

What:  Renders notes as human-readable text for the CLI.

Example:
    Title: Groceries
    Body: Milk, eggs
    Added on: 2024-01-15T12:00:00+00:00
"""

from datetime import datetime
from typing import Any, List

from note_organizer.models.note import Note

# Fields whose label is not simply the capitalized field name
FIELD_LABELS = {"time_added": "Added on"}

EMPTY_LIST_MESSAGE = "Notes is empty."


def field_label(name: str) -> str:
    return FIELD_LABELS.get(name, name.capitalize())


def _render_value(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def format_note(note: Note) -> str:
    """One `Label: value` line per field, in the model's field order."""
    return "\n".join(
        f"{field_label(name)}: {_render_value(getattr(note, name))}"
        for name in Note.model_fields
    )


def format_note_list(notes: List[Note]) -> str:
    """Numbered listing, each entry preceded by a blank line."""
    if not notes:
        return EMPTY_LIST_MESSAGE
    return "\n".join(
        f"\n{index}. {format_note(note)}" for index, note in enumerate(notes, start=1)
    )
