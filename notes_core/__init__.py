"""Local note storage and the observable note list built on top of it."""

from notes_core.app import open_notes
from notes_core.config import NotesSettings
from notes_core.controller import NoteListController
from notes_core.editor import NoteEditor, preview
from notes_core.exceptions import NotesError, StorageError
from notes_core.schemas import NoteOut
from notes_core.store import NoteStore

__all__ = [
    "NoteEditor",
    "NoteListController",
    "NoteOut",
    "NoteStore",
    "NotesError",
    "NotesSettings",
    "StorageError",
    "open_notes",
    "preview",
]
