"""
Engine, session factory and schema-version helpers for the SQLite notes database.

The schema version lives in SQLite's PRAGMA user_version so it travels with the
database file itself.
"""
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from notes_core.config import NotesSettings

logger = logging.getLogger(__name__)

Base = declarative_base()


# PUBLIC_INTERFACE
def create_store_engine(settings: NotesSettings) -> Engine:
    """
    Create the engine backing a NoteStore.

    An in-memory database only exists for as long as its connection does, so it
    is pinned to a single shared connection with StaticPool.
    """
    if settings.in_memory:
        engine = create_engine(
            settings.database_url,
            echo=settings.echo_sql,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(
            settings.database_url,
            echo=settings.echo_sql,
        )
    logger.debug("Created engine for %s", engine.url)
    return engine


# PUBLIC_INTERFACE
def make_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to engine, with the same flags the API sessions used."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


def get_schema_version(conn: Connection) -> int:
    return int(conn.execute(text("PRAGMA user_version")).scalar_one())


def set_schema_version(conn: Connection, version: int) -> None:
    # PRAGMA does not accept bound parameters.
    conn.execute(text(f"PRAGMA user_version = {int(version)}"))
