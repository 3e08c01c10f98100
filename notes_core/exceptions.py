class NotesError(Exception):
    """Base class for errors raised by notes_core."""


class StorageError(NotesError):
    """The notes database could not be read or written."""
