"""
Note Organizer: Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own notes file under pytest's tmp_path; nothing
       touches the working directory.

Fixture Hierarchy:
    ├── notes_path:     Path of a not-yet-created notes file
    ├── storage:        NoteStorage bound to notes_path
    ├── sample_notes:   Two notes, "A" and "B", with fixed timestamps
    ├── seeded_storage: storage with sample_notes already written
    └── test_client:    HTTPX AsyncClient whose requests use `storage`
"""

import os
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Keep the lifespan and the default storage away from the real notes file
os.environ.setdefault("NOTES_FILE", os.path.join(os.path.dirname(__file__), ".unused-notes.json"))
os.environ.setdefault("LOG_LEVEL", "WARNING")

from note_organizer.models.note import Note  # noqa: E402
from note_organizer.storage import NoteStorage  # noqa: E402


@pytest.fixture
def notes_path(tmp_path):
    return tmp_path / "notes.json"


@pytest.fixture
def storage(notes_path):
    return NoteStorage(notes_path)


@pytest.fixture
def sample_notes():
    return [
        Note(title="A", body="old", time_added=datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)),
        Note(title="B", body="second", time_added=datetime(2024, 1, 16, 8, 30, tzinfo=timezone.utc)),
    ]


@pytest_asyncio.fixture
async def seeded_storage(storage, sample_notes):
    await storage.save(sample_notes)
    return storage


@pytest_asyncio.fixture
async def test_client(storage):
    """
    HTTPX AsyncClient talking to a fresh app.

    The get_note_service dependency is overridden so every request works on
    this test's notes file. ASGITransport does not run the lifespan, so the
    file is only created by the test itself.
    """
    from note_organizer.main import create_app
    from note_organizer.routes.notes import get_note_service
    from note_organizer.services.note_service import NoteService

    app = create_app()
    app.dependency_overrides[get_note_service] = lambda: NoteService(storage)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
