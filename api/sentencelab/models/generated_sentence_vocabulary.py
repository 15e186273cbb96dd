"""
GeneratedSentenceVocabulary model - slot bindings of a generated sentence.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from typing import Optional, TYPE_CHECKING
from datetime import datetime
from sentencelab.models.timestamps import timestamp_field

if TYPE_CHECKING:
    from sentencelab.models.generated_sentence import GeneratedSentence
    from sentencelab.models.vocabulary import Vocabulary


class GeneratedSentenceVocabulary(SQLModel, table=True):
    """Join table - which vocabulary entry filled which slot of a generated sentence."""
    __tablename__ = "generated_sentence_vocabulary"
    __table_args__ = (
        UniqueConstraint("generated_sentence_id", "slot_name", name="uq_generated_sentence_slot"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    generated_sentence_id: int = Field(
        sa_column=Column(Integer, ForeignKey("generated_sentences.id", ondelete="CASCADE"), nullable=False)
    )
    vocabulary_id: int = Field(foreign_key="vocabulary.id")
    slot_name: str
    created_at: datetime = timestamp_field()

    # Relationships
    generated_sentence: "GeneratedSentence" = Relationship(back_populates="vocabulary_bindings")
    vocabulary: "Vocabulary" = Relationship(back_populates="sentence_bindings")
