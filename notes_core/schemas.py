from pydantic import BaseModel, ConfigDict, Field, field_validator


class NoteCreate(BaseModel):
    """Content submitted from the input form; empty drafts never reach the store."""
    content: str = Field(..., min_length=1, description="Note content (non-empty).")


class NoteOut(BaseModel):
    """Immutable note snapshot published to observers."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int = Field(..., description="Database ID of the note.")
    content: str = Field(..., description="Full note content.")

    @field_validator("content", mode="before")
    @classmethod
    def _null_content_as_empty(cls, value):
        # Databases written before content was NOT NULL may hold NULL rows.
        return "" if value is None else value

    def as_pair(self) -> tuple[int, str]:
        return self.id, self.content
