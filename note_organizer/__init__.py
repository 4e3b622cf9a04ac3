"""
Note Organizer: Application Package Initializer
===============================================

What: Marks the `note_organizer` directory as a Python package.
Why:  Enables module imports like `from note_organizer.config import settings`.
Who:  Used by the console script, uvicorn, and pytest.

Architecture Note:
    Two front ends share one small core:

    ┌──────────────────────┐   ┌──────────────────────┐
    │   CLI menu (cli.py)  │   │  HTTP API (routes/)  │  ← input/output only
    └──────────┬───────────┘   └──────────┬───────────┘
               │                          │
               │               ┌──────────▼───────────┐
               │               │   NoteService        │  ← load → operate → save
               │               └──────────┬───────────┘
    ┌──────────▼──────────────────────────▼───────────┐
    │   NoteRepository (services/note_repository.py)  │  ← in-memory title ops
    ├──────────────────────────────────────────────────┤
    │   NoteStorage (storage.py)                      │  ← whole-file JSON I/O
    └──────────────────────────────────────────────────┘

    The notes file is the database: every operation reads the full
    collection and every mutation rewrites it.
"""

__version__ = "1.0.0"
