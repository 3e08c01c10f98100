from sqlalchemy import Column, Integer, Text

from notes_core.db import Base


class Note(Base):
    """SQLAlchemy model representing a note."""
    __tablename__ = "notes"
    # AUTOINCREMENT keeps ids of deleted rows from being handed out again.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    content = Column(Text, nullable=False)
