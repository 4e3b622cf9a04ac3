"""
Note Organizer: Interactive Menu
================================

What:  The numbered text menu: add, list, read, delete, update, exit.
How:   Each cycle shows the menu, loads a fresh collection from the notes
       file, runs one action through NoteRepository, and saves if the
       action changed anything. Console I/O is plain blocking input/print;
       only the storage coroutines go through asyncio.run.

Cycle rules:
    - "6" ends the loop; so does end of input or Ctrl+C
    - An unknown choice re-shows the menu without touching the file
    - If the file cannot be loaded, the error is printed and the cycle ends,
      except for "1" (add) on a missing file, which starts empty
    - Every NoteOrganizerError is printed as one line, never raised
"""

import asyncio
import logging
from typing import Callable, Dict, List, Optional

from note_organizer.exceptions import (
    DuplicateTitleError,
    NoteOrganizerError,
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
)
from note_organizer.models.note import Note
from note_organizer.services.formatter import format_note, format_note_list
from note_organizer.services.note_repository import NoteRepository, note_repository
from note_organizer.storage import NoteStorage

logger = logging.getLogger(__name__)

MENU = """
\tMenu
*****************
1. Add a note
2. List all notes
3. Read a note
4. Delete a note
5. Update a note
6. Exit
"""

ADD_CHOICE = "1"
EXIT_CHOICE = "6"

INVALID_CHOICE_MESSAGE = "Invalid choice, please enter a number from 1 to 6."


def require_text(value: str, field: str) -> str:
    """
    Trim input and reject it if nothing is left.

    Raises:
        ValidationError: value is empty or whitespace only.
    """
    text = value.strip()
    if not text:
        raise ValidationError(message=f"Note {field} cannot be empty.", field=field)
    return text


class NoteMenu:
    """
    Menu loop over one notes file.

    Args:
        storage:     Notes file accessor (defaults to the configured file)
        repository:  In-memory note operations
        input_func:  Reads one line given a prompt (builtin input by default)
        output_func: Prints one message (builtin print by default)
    """

    def __init__(
        self,
        storage: Optional[NoteStorage] = None,
        repository: NoteRepository = note_repository,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        self.storage = storage or NoteStorage()
        self.repository = repository
        self._input = input_func
        self._output = output_func
        self._actions: Dict[str, Callable[[List[Note]], None]] = {
            "1": self.add_note,
            "2": self.list_notes,
            "3": self.read_note,
            "4": self.delete_note,
            "5": self.update_note,
        }

    # ── Input helpers ─────────────────────────────────────────────────────

    def prompt_text(self, field: str) -> str:
        """Ask for a note field until a non-blank answer is given."""
        while True:
            try:
                return require_text(self._input(f"Enter note {field}: "), field)
            except ValidationError as e:
                logger.debug("Re-prompting: %s", e.message)

    def read_choice(self) -> str:
        self._output(MENU)
        return self._input("Enter your choice: ").strip()

    # ── Storage ───────────────────────────────────────────────────────────

    def load(self) -> List[Note]:
        return asyncio.run(self.storage.load())

    def save(self, notes: List[Note]) -> None:
        asyncio.run(self.storage.save(notes))

    # ── Loop ──────────────────────────────────────────────────────────────

    def run(self) -> None:
        while True:
            try:
                if not self.run_once():
                    break
            except (EOFError, KeyboardInterrupt):
                self._output("")
                break

    def run_once(self) -> bool:
        """One menu cycle. Returns False when the user chose to exit."""
        choice = self.read_choice()

        if choice == EXIT_CHOICE:
            return False

        action = self._actions.get(choice)
        if action is None:
            self._output(INVALID_CHOICE_MESSAGE)
            return True

        try:
            notes = self.load()
        except StorageUnavailableError as e:
            # A corrupt file must not be overwritten by an add
            if choice != ADD_CHOICE or self.storage.exists():
                self._output(e.message)
                return True
            notes = []

        try:
            action(notes)
        except NoteOrganizerError as e:
            logger.debug("Menu action %s failed: %s", choice, e.context)
            self._output(e.message)

        return True

    # ── Actions ───────────────────────────────────────────────────────────

    def add_note(self, notes: List[Note]) -> None:
        title = self.prompt_text("title")
        # Checked before asking for the body so a duplicate fails fast
        if self.repository.find_by_title(notes, title) is not None:
            raise DuplicateTitleError(title)

        notes = self.repository.add(notes, title, self.prompt_text("body"))
        self.save(notes)
        self._output("Note added successfully!\n")

    def list_notes(self, notes: List[Note]) -> None:
        self._output(format_note_list(notes))

    def read_note(self, notes: List[Note]) -> None:
        title = self.prompt_text("title")
        note = self.repository.find_by_title(notes, title)
        if note is None:
            raise NotFoundError(title)
        self._output(f"\n{format_note(note)}")

    def delete_note(self, notes: List[Note]) -> None:
        notes = self.repository.delete(notes, self.prompt_text("title"))
        self.save(notes)
        self._output("Note deleted successfully!\n")

    def update_note(self, notes: List[Note]) -> None:
        title = self.prompt_text("title")
        if self.repository.find_by_title(notes, title) is None:
            raise NotFoundError(title)

        notes = self.repository.update(notes, title, self.prompt_text("body"))
        self.save(notes)
        self._output("Note updated successfully!")
