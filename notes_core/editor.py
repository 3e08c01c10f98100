"""
Input-form state for the notes screen.

A screen binds its text field and buttons to a NoteEditor: typing sets
``text``, tapping a note calls ``select``, the main button calls ``submit``
and the back button calls ``cancel``. This is the only place empty content
is turned away; the controller and store accept whatever they are given.
"""
import logging
from typing import Optional

from pydantic import ValidationError

from notes_core.controller import NoteListController
from notes_core.schemas import NoteCreate, NoteOut

logger = logging.getLogger(__name__)

ADD_LABEL = "Add note"
UPDATE_LABEL = "Update"
ELLIPSIS = "..."


# PUBLIC_INTERFACE
def preview(content: str, limit: int = 50) -> str:
    """Text shown for a note in the list: content longer than limit is cut and suffixed with '...'."""
    if len(content) > limit:
        return content[:limit] + ELLIPSIS
    return content


class NoteEditor:
    """Draft text plus which note, if any, is being edited."""

    def __init__(self, controller: NoteListController):
        self.controller = controller
        self.text = ""
        self.editing_id: Optional[int] = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def submit_label(self) -> str:
        return UPDATE_LABEL if self.is_editing else ADD_LABEL

    def preview(self, note: NoteOut) -> str:
        return preview(note.content, self.controller.store.settings.preview_length)

    # PUBLIC_INTERFACE
    def select(self, note: NoteOut) -> None:
        """Load note into the draft and switch to edit mode."""
        self.text = note.content
        self.editing_id = note.id

    # PUBLIC_INTERFACE
    def submit(self) -> bool:
        """
        Save the draft.

        In edit mode the selected note is updated, otherwise a new note is added.
        An empty draft is ignored and False is returned; the form state is left
        as it was. On success the draft is cleared and edit mode is left.
        """
        try:
            draft = NoteCreate(content=self.text)
        except ValidationError:
            logger.debug("Ignoring empty note submission")
            return False

        if self.editing_id is not None:
            self.controller.update_note(self.editing_id, draft.content)
        else:
            self.controller.add_note(draft.content)
        self.cancel()
        return True

    # PUBLIC_INTERFACE
    def cancel(self) -> None:
        """Discard the draft and leave edit mode."""
        self.text = ""
        self.editing_id = None

    # PUBLIC_INTERFACE
    def delete(self, note_id: int) -> None:
        """Delete a note; deleting the note being edited also leaves edit mode."""
        self.controller.delete_note(note_id)
        if note_id == self.editing_id:
            self.cancel()
