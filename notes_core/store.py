"""
Durable CRUD persistence for notes.

NoteStore owns one SQLAlchemy engine for its whole lifetime and is the single
source of truth the controller re-reads after every write.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from notes_core.config import NotesSettings
from notes_core.db import Base, create_store_engine, get_schema_version, make_session_factory, set_schema_version
from notes_core.exceptions import StorageError
from notes_core.models import Note
from notes_core.schemas import NoteOut

logger = logging.getLogger(__name__)


class NoteStore:
    """SQLite-backed table of notes."""

    def __init__(self, settings: Optional[NotesSettings] = None):
        self.settings = settings or NotesSettings()
        self._engine = create_store_engine(self.settings)
        self._sessions = make_session_factory(self._engine)
        # One logical writer at a time.
        self._lock = threading.RLock()
        self._closed = False

    def __enter__(self) -> "NoteStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        """Yield a session for one operation; commit on success, StorageError on failure."""
        with self._lock:
            if self._closed:
                raise StorageError(f"Cannot {action}: note store is closed")
            session = self._sessions()
            try:
                yield session
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                logger.exception("Failed to %s", action)
                raise StorageError(f"Failed to {action}: {exc}") from exc
            finally:
                session.close()

    # PUBLIC_INTERFACE
    def initialize(self) -> None:
        """
        Create the notes table if it does not exist. Safe to call on every start.

        If the database was stamped with an older schema version the table is
        dropped and recreated: existing notes are discarded, not migrated.
        A database stamped with a newer version than expected is refused.
        """
        expected = self.settings.schema_version
        with self._lock:
            if self._closed:
                raise StorageError("Cannot initialize: note store is closed")
            try:
                with self._engine.begin() as conn:
                    stored = get_schema_version(conn)
                    if stored > expected:
                        raise StorageError(
                            f"Database schema version {stored} is newer than supported version {expected}"
                        )
                    if 0 < stored < expected:
                        logger.warning(
                            "Upgrading notes schema from version %s to %s; existing notes are dropped",
                            stored,
                            expected,
                        )
                        Base.metadata.drop_all(bind=conn, tables=[Note.__table__])
                    Base.metadata.create_all(bind=conn)
                    if stored != expected:
                        set_schema_version(conn, expected)
            except SQLAlchemyError as exc:
                logger.exception("Database initialization failed (tables not created).")
                raise StorageError(f"Failed to initialize notes database: {exc}") from exc
        logger.info("Notes database ready at %s (schema version %s)", self.settings.database_path, expected)

    # PUBLIC_INTERFACE
    def insert(self, content: str) -> int:
        """Append a note and return the id the database assigned to it."""
        with self._session("insert note") as session:
            note = Note(content=content)
            session.add(note)
            session.flush()
            note_id = note.id
        logger.info("Inserted note id=%s content_len=%s", note_id, len(content))
        return note_id

    # PUBLIC_INTERFACE
    def update(self, note_id: int, content: str) -> None:
        """Replace the content of a note. An unknown id matches no rows and is not an error."""
        with self._session("update note") as session:
            result = session.execute(
                update(Note).where(Note.id == note_id).values(content=content),
                execution_options={"synchronize_session": False},
            )
        logger.info("Updated note id=%s content_len=%s rows=%s", note_id, len(content), result.rowcount)

    # PUBLIC_INTERFACE
    def delete(self, note_id: int) -> None:
        """Remove a note. An unknown id matches no rows and is not an error."""
        with self._session("delete note") as session:
            result = session.execute(
                delete(Note).where(Note.id == note_id),
                execution_options={"synchronize_session": False},
            )
        logger.info("Deleted note id=%s rows=%s", note_id, result.rowcount)

    # PUBLIC_INTERFACE
    def list_all(self) -> List[NoteOut]:
        """Return a fresh snapshot of every note, in rowid (insertion) order."""
        with self._session("list notes") as session:
            rows = session.scalars(select(Note).order_by(Note.id)).all()
            return [NoteOut.model_validate(row) for row in rows]

    def close(self) -> None:
        """Release the engine. Further operations raise StorageError."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._engine.dispose()
        logger.debug("Closed note store at %s", self.settings.database_path)
