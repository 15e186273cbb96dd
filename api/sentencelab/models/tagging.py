"""
Tagging model - generic link between a tag and a target record.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime
from sentencelab.models.timestamps import timestamp_field

if TYPE_CHECKING:
    from sentencelab.models.tag import Tag


class Tagging(SQLModel, table=True):
    """Tagging table - (tag, target_type, target_id). For templates target_type is 'template'."""
    __tablename__ = "taggings"

    id: Optional[int] = Field(default=None, primary_key=True)
    tag_id: int = Field(foreign_key="tags.id", index=True)
    target_type: str
    target_id: int  # Not a foreign key: the referenced table depends on target_type
    created_at: datetime = timestamp_field()

    # Relationships
    tag: "Tag" = Relationship(back_populates="taggings")
