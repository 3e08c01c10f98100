"""Shared fixtures: every test gets its own file-backed SQLite database."""

import pytest
from sqlalchemy import text

from notes_core.config import NotesSettings
from notes_core.controller import NoteListController
from notes_core.store import NoteStore


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fresh database file."""
    return NotesSettings(database_path=str(tmp_path / "notes.db"))


@pytest.fixture
def store(settings):
    """Initialized store, closed after the test."""
    note_store = NoteStore(settings)
    note_store.initialize()
    yield note_store
    note_store.close()


@pytest.fixture
def controller(store):
    return NoteListController(store)


def pairs(notes):
    return [note.as_pair() for note in notes]


def block_writes(store):
    """Make SQLite abort every later write to the notes table with a constraint error."""
    with store._engine.begin() as conn:
        for event in ("INSERT", "UPDATE", "DELETE"):
            conn.execute(
                text(
                    f"CREATE TRIGGER block_{event.lower()} BEFORE {event} ON notes "
                    "BEGIN SELECT RAISE(ABORT, 'notes are read-only'); END"
                )
            )
