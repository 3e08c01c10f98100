"""
Observable list of notes kept in step with a NoteStore.

Every mutation is forwarded to the store, after which the whole list is
re-read and published. The in-memory list is never edited in place, so it is
always exactly what the store holds once a call returns. This costs one full
read per write, which is fine for the handful of notes this app is built for.
"""
import logging
from typing import Callable, List, Tuple

from notes_core.schemas import NoteOut
from notes_core.store import NoteStore

logger = logging.getLogger(__name__)

NoteList = Tuple[NoteOut, ...]
Observer = Callable[[NoteList], None]


class NoteListController:
    """Holds the current notes and the entry points that change them."""

    def __init__(self, store: NoteStore):
        self._store = store
        self._observers: List[Observer] = []
        self._notes: NoteList = tuple(store.list_all())

    @property
    def store(self) -> NoteStore:
        return self._store

    @property
    def notes(self) -> NoteList:
        """Current notes, in store order. Replaced wholesale after each mutation."""
        return self._notes

    # PUBLIC_INTERFACE
    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register observer to be called with the new list after every mutation.

        Observers run synchronously on the mutating thread, in subscription
        order. Returns a callable that removes the observer; calling it more
        than once does nothing.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    # PUBLIC_INTERFACE
    def add_note(self, content: str) -> None:
        self._store.insert(content)
        self.refresh()

    # PUBLIC_INTERFACE
    def update_note(self, note_id: int, content: str) -> None:
        self._store.update(note_id, content)
        self.refresh()

    # PUBLIC_INTERFACE
    def delete_note(self, note_id: int) -> None:
        self._store.delete(note_id)
        self.refresh()

    # PUBLIC_INTERFACE
    def refresh(self) -> None:
        """Reload every note from the store and publish the result."""
        notes = tuple(self._store.list_all())
        self._notes = notes
        logger.debug("Publishing %s notes to %s observers", len(notes), len(self._observers))
        for observer in list(self._observers):
            observer(notes)
