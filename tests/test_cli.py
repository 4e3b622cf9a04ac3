"""
Note Organizer: Interactive Menu Tests
======================================

What:  Drives NoteMenu with scripted input and captures its output.
How:   input_func pops answers from a list (EOFError when exhausted, like a
       closed stdin); output_func appends to a list. The menu is synchronous,
       so these tests are plain functions and read the file back with
       asyncio.run.
"""

import asyncio

import pytest

from note_organizer.cli import INVALID_CHOICE_MESSAGE, MENU, NoteMenu, require_text
from note_organizer.exceptions import StorageWriteError, ValidationError
from note_organizer.storage import NoteStorage


class ScriptedConsole:

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, message=""):
        self.output.append(message)

    @property
    def text(self):
        return "\n".join(self.output)


def make_menu(storage, *answers):
    console = ScriptedConsole(*answers)
    menu = NoteMenu(storage=storage, input_func=console.input, output_func=console.print)
    return menu, console


def load(storage):
    return asyncio.run(storage.load())


@pytest.fixture
def menu_storage(storage, sample_notes):
    asyncio.run(storage.save(sample_notes))
    return storage


class TestRequireText:

    def test_trims(self):
        assert require_text("  hello  ", "title") == "hello"

    def test_rejects_blank(self):
        with pytest.raises(ValidationError) as exc_info:
            require_text("   ", "body")
        assert exc_info.value.field == "body"


class TestMenuLoop:

    def test_exit_choice_stops(self, storage):
        menu, console = make_menu(storage, "6", "2")

        menu.run()

        assert console.output == [MENU]
        assert console.answers == ["2"]

    def test_end_of_input_stops(self, storage):
        menu, console = make_menu(storage)

        menu.run()

        assert console.prompts == ["Enter your choice: "]

    def test_interrupt_stops(self, storage):
        def interrupted(prompt):
            raise KeyboardInterrupt

        menu = NoteMenu(storage=storage, input_func=interrupted, output_func=lambda m="": None)

        menu.run()

    def test_invalid_choice(self, storage):
        menu, console = make_menu(storage, "9", "6")

        menu.run()

        assert INVALID_CHOICE_MESSAGE in console.output

    def test_missing_store_reported_for_list(self, storage):
        menu, console = make_menu(storage, "2", "6")

        menu.run()

        assert "Notes file not found." in console.output

    def test_non_utf8_store_reported_and_loop_continues(self, storage, notes_path):
        notes_path.write_bytes(b"\xff\xfe not utf8")
        menu, console = make_menu(storage, "2", "9", "6")

        menu.run()

        assert "Notes file is corrupted." in console.output
        assert INVALID_CHOICE_MESSAGE in console.output


class TestMenuActions:

    def test_add_to_missing_store_creates_it(self, storage):
        menu, console = make_menu(storage, "1", "Groceries", "Milk, eggs", "6")

        menu.run()

        assert [(n.title, n.body) for n in load(storage)] == [("Groceries", "Milk, eggs")]
        assert "Note added successfully!\n" in console.output

    def test_add_does_not_overwrite_corrupt_store(self, storage, notes_path):
        notes_path.write_text("not json", encoding="utf-8")
        menu, console = make_menu(storage, "1", "6")

        menu.run()

        assert "Notes file is corrupted." in console.output
        assert notes_path.read_text(encoding="utf-8") == "not json"

    def test_add_reprompts_on_blank_input(self, storage):
        menu, console = make_menu(storage, "1", "", "   ", "  Title  ", "", "Body", "6")

        menu.run()

        loaded = load(storage)
        assert loaded[0].title == "Title"
        assert loaded[0].body == "Body"
        assert console.prompts.count("Enter note title: ") == 3
        assert console.prompts.count("Enter note body: ") == 2

    def test_add_duplicate_stops_before_body(self, menu_storage, sample_notes):
        menu, console = make_menu(menu_storage, "1", "a", "6")

        menu.run()

        assert "Failed to add, title already exists." in console.output
        assert "Enter note body: " not in console.prompts
        assert load(menu_storage) == sample_notes

    def test_list(self, menu_storage):
        menu, console = make_menu(menu_storage, "2", "6")

        menu.run()

        assert "1. Title: A" in console.text
        assert "2. Title: B" in console.text

    def test_list_empty(self, storage):
        asyncio.run(storage.save([]))
        menu, console = make_menu(storage, "2", "6")

        menu.run()

        assert "Notes is empty." in console.output

    def test_read(self, menu_storage):
        menu, console = make_menu(menu_storage, "3", "b", "6")

        menu.run()

        assert "\nTitle: B\nBody: second\nAdded on: 2024-01-16T08:30:00+00:00" in console.output

    def test_read_missing(self, menu_storage):
        menu, console = make_menu(menu_storage, "3", "Z", "6")

        menu.run()

        assert "Note not found." in console.output

    def test_delete(self, menu_storage):
        menu, console = make_menu(menu_storage, "4", "A", "6")

        menu.run()

        assert [n.title for n in load(menu_storage)] == ["B"]
        assert "Note deleted successfully!\n" in console.output

    def test_delete_twice(self, menu_storage):
        menu, console = make_menu(menu_storage, "4", "A", "4", "a", "6")

        menu.run()

        assert console.output.count("Note not found.") == 1

    def test_update(self, menu_storage, sample_notes):
        menu, console = make_menu(menu_storage, "5", "A", "new", "6")

        menu.run()

        loaded = load(menu_storage)
        assert loaded[0].body == "new"
        assert loaded[0].time_added == sample_notes[0].time_added
        assert "Note updated successfully!" in console.output

    def test_update_missing_does_not_ask_for_body(self, menu_storage):
        menu, console = make_menu(menu_storage, "5", "Z", "6")

        menu.run()

        assert "Note not found." in console.output
        assert "Enter note body: " not in console.prompts

    def test_write_failure_is_printed(self, tmp_path):
        storage = NoteStorage(tmp_path / "missing-dir" / "notes.json")
        menu, console = make_menu(storage, "1", "A", "b", "6")

        menu.run()

        assert StorageWriteError().message in console.output
