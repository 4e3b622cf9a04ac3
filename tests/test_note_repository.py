"""
Note Organizer: Note Repository Unit Tests
==========================================

What:  In-memory title operations; no storage involved.
"""

from datetime import datetime, timezone

import pytest

from note_organizer.exceptions import DuplicateTitleError, NotFoundError
from note_organizer.models.note import Note
from note_organizer.services.note_repository import NoteRepository, titles_match


def make_note(title, body="body"):
    return Note(title=title, body=body, time_added=datetime(2024, 1, 1, tzinfo=timezone.utc))


class TestFindByTitle:

    def setup_method(self):
        self.repo = NoteRepository()

    def test_case_insensitive(self):
        notes = [make_note("Foo"), make_note("Bar")]

        assert self.repo.find_by_title(notes, "Foo") is notes[0]
        assert self.repo.find_by_title(notes, "foo") is notes[0]
        assert self.repo.find_by_title(notes, "FOO") is notes[0]

    def test_absent(self):
        assert self.repo.find_by_title([make_note("Foo")], "Baz") is None
        assert self.repo.find_by_title([], "Foo") is None

    def test_first_match_wins_on_duplicates(self):
        notes = [make_note("Dup", "first"), make_note("dup", "second")]

        assert self.repo.find_by_title(notes, "DUP").body == "first"

    def test_titles_match(self):
        assert titles_match("Groceries", "gROCERIES")
        assert not titles_match("Groceries", "Grocery")


class TestAdd:

    def setup_method(self):
        self.repo = NoteRepository()

    def test_appends_with_timestamp(self):
        notes = [make_note("A")]
        before = datetime.now(timezone.utc)

        result = self.repo.add(notes, "B", "new body")

        assert [n.title for n in result] == ["A", "B"]
        assert result[-1].body == "new body"
        assert result[-1].time_added >= before

    def test_duplicate_title_case_insensitive(self):
        notes = [make_note("Groceries")]

        with pytest.raises(DuplicateTitleError) as exc_info:
            self.repo.add(notes, "groceries", "x")

        assert exc_info.value.title == "groceries"
        assert len(notes) == 1

    def test_keeps_titles_unique(self):
        notes = []
        for title in ["One", "Two", "one", "TWO", "Three"]:
            try:
                notes = self.repo.add(notes, title, "b")
            except DuplicateTitleError:
                pass

        lowered = [n.title.lower() for n in notes]
        assert lowered == ["one", "two", "three"]


class TestDelete:

    def setup_method(self):
        self.repo = NoteRepository()

    def test_removes_case_insensitive_match(self):
        notes = [make_note("A"), make_note("B")]

        result = self.repo.delete(notes, "a")

        assert [n.title for n in result] == ["B"]

    def test_removes_every_duplicate(self):
        notes = [make_note("Dup"), make_note("Keep"), make_note("DUP")]

        result = self.repo.delete(notes, "dup")

        assert [n.title for n in result] == ["Keep"]

    def test_absent_title(self):
        with pytest.raises(NotFoundError):
            self.repo.delete([make_note("A")], "Z")

    def test_second_delete_fails(self):
        notes = self.repo.delete([make_note("A")], "A")

        with pytest.raises(NotFoundError):
            self.repo.delete(notes, "A")


class TestUpdate:

    def setup_method(self):
        self.repo = NoteRepository()

    def test_changes_body_only(self):
        original = make_note("A", "old")
        stamp = original.time_added

        result = self.repo.update([original], "a", "new")

        assert result[0] is original
        assert original.body == "new"
        assert original.title == "A"
        assert original.time_added == stamp

    def test_absent_title(self):
        with pytest.raises(NotFoundError):
            self.repo.update([make_note("A")], "B", "new")
