"""
Tag model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sentencelab.models.timestamps import timestamp_field

if TYPE_CHECKING:
    from sentencelab.models.tagging import Tagging
    from sentencelab.models.tag_vocab_mapping import TagVocabMapping


class Tag(SQLModel, table=True):
    """Tag table - two-level labels scoping templates and vocabulary topics."""
    __tablename__ = "tags"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    type: Optional[str] = None
    parent_tag_id: Optional[int] = Field(default=None, foreign_key="tags.id")  # Null for top-level tags
    description: Optional[str] = None
    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field()

    # Relationships
    taggings: List["Tagging"] = Relationship(back_populates="tag")
    vocab_mappings: List["TagVocabMapping"] = Relationship(back_populates="tag")
