"""
TagVocabMapping model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from sentencelab.models.tag import Tag


class TagVocabMapping(SQLModel, table=True):
    """Restricts a tag's eligible vocabulary to a topic and optionally a subtopic."""
    __tablename__ = "tag_vocab_mapping"

    id: Optional[int] = Field(default=None, primary_key=True)
    tag_id: int = Field(foreign_key="tags.id", index=True)
    vocab_topic: str
    vocab_subtopic: Optional[str] = None  # Null means any subtopic of vocab_topic

    # Relationships
    tag: "Tag" = Relationship(back_populates="vocab_mappings")
