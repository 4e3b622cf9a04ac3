"""
Note Organizer: Notes File Storage
==================================

What:  Reads the whole note collection from the JSON file and writes it back.
Why:   The file is the only persistence; every operation works on a full copy.
How:   Async file I/O with aiofiles, validation/serialization with a pydantic
       TypeAdapter over List[Note].
Who:   Used by NoteService (HTTP) and NoteMenu (CLI).

Semantics:
    load()  → the whole collection, or StorageUnavailableError
    save()  → full overwrite, or StorageWriteError

    There is no locking, no temp-file swap and no retry. A failure in the
    middle of a write can leave a truncated file behind; the next load then
    reports the store as unavailable.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import aiofiles
from pydantic import ValidationError as PydanticValidationError

from note_organizer.config import settings
from note_organizer.exceptions import StorageUnavailableError, StorageWriteError
from note_organizer.models.note import Note, NoteCollection

logger = logging.getLogger(__name__)


class NoteStorage:
    """
    Whole-file accessor for the notes JSON file.

    Args:
        path:   File location. Defaults to settings.notes_file.
        indent: JSON indentation for writes. Defaults to settings.json_indent.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        indent: Optional[int] = None,
    ):
        self.path = Path(path or settings.notes_file)
        self.indent = indent if indent is not None else settings.json_indent

    def exists(self) -> bool:
        return self.path.is_file()

    async def load(self) -> List[Note]:
        """
        Read and validate the entire collection.

        Raises:
            StorageUnavailableError: file missing or unreadable, not UTF-8, invalid
                JSON, or JSON that is not an array of complete note objects.
        """
        try:
            async with aiofiles.open(self.path, "rb") as f:
                raw = await f.read()
        except FileNotFoundError:
            raise StorageUnavailableError(
                message="Notes file not found.",
                context={"path": str(self.path)},
            )
        except OSError as e:
            logger.error("Failed to read notes file %s: %s", self.path, str(e))
            raise StorageUnavailableError(
                message="Notes file could not be read.",
                context={"path": str(self.path), "os_error": str(e)},
            )

        # Bytes go straight to the parser; bad UTF-8 fails validation like bad JSON
        try:
            notes = NoteCollection.validate_json(raw)
        except PydanticValidationError as e:
            logger.error(
                "Notes file %s is not a valid note array (%d errors)",
                self.path,
                e.error_count(),
            )
            raise StorageUnavailableError(
                message="Notes file is corrupted.",
                context={"path": str(self.path), "errors": e.error_count()},
            )

        logger.debug("Loaded %d notes from %s", len(notes), self.path)
        return notes

    async def save(self, notes: List[Note]) -> None:
        """
        Serialize the full collection and overwrite the file.

        Raises:
            StorageWriteError: any OS-level write failure.
        """
        payload = NoteCollection.dump_json(notes, indent=self.indent)

        try:
            async with aiofiles.open(self.path, "wb") as f:
                await f.write(payload)
        except OSError as e:
            logger.error("Failed to write notes file %s: %s", self.path, str(e))
            raise StorageWriteError(
                message="Failed to save notes.",
                context={"path": str(self.path), "os_error": str(e)},
            )

        logger.debug("Saved %d notes to %s", len(notes), self.path)

    async def initialize(self) -> bool:
        """
        Create an empty collection if the file does not exist yet.

        Returns:
            True when the file was created, False when it already existed.
        """
        if self.exists():
            return False

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageWriteError(
                message="Failed to create the notes directory.",
                context={"path": str(self.path.parent), "os_error": str(e)},
            )

        await self.save([])
        logger.info("Created empty notes file at %s", self.path.resolve())
        return True
