import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from notes_core.config import NotesSettings
from notes_core.controller import NoteListController
from notes_core.store import NoteStore

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
@contextmanager
def open_notes(settings: Optional[NotesSettings] = None) -> Iterator[NoteListController]:
    """
    Open the notes database for the lifetime of the block.

    The store is created and initialized once, handed to a fresh controller,
    and closed when the block exits, whether or not it raised.
    """
    store = NoteStore(settings)
    try:
        store.initialize()
        controller = NoteListController(store)
        logger.info("Loaded %s notes", len(controller.notes))
        yield controller
    finally:
        store.close()
