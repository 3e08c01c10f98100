from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

MEMORY_DATABASE = ":memory:"


class NotesSettings(BaseModel):
    """Settings for a notes store, passed explicitly by whoever owns the app scope."""
    model_config = ConfigDict(frozen=True)

    database_path: str = Field("notes.db", description="SQLite file holding the notes table, or ':memory:'.")
    schema_version: int = Field(1, ge=1, description="Expected schema version stamped in PRAGMA user_version.")
    echo_sql: bool = Field(False, description="Log every SQL statement the engine emits.")
    preview_length: int = Field(50, ge=1, description="Characters shown for a note in a list row.")

    @property
    def in_memory(self) -> bool:
        return self.database_path == MEMORY_DATABASE

    @property
    def database_url(self) -> str:
        """
        Build the SQLAlchemy URL for the configured database.

        Relative paths are resolved against the current working directory so the
        URL stays stable if the process later changes directory.
        """
        if self.in_memory:
            return "sqlite://"
        return f"sqlite:///{Path(self.database_path).expanduser().resolve()}"
