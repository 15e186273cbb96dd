"""
PracticeHistory model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, Integer, ForeignKey
from typing import Optional, TYPE_CHECKING
from datetime import datetime
from sentencelab.models.timestamps import timestamp_field

if TYPE_CHECKING:
    from sentencelab.models.generated_sentence import GeneratedSentence


class PracticeHistory(SQLModel, table=True):
    """Practice history table - append-only review log of generated sentences."""
    __tablename__ = "practice_history"

    id: Optional[int] = Field(default=None, primary_key=True)
    generated_sentence_id: int = Field(
        sa_column=Column(Integer, ForeignKey("generated_sentences.id", ondelete="CASCADE"), nullable=False)
    )
    practiced_at: datetime = timestamp_field()
    result: Optional[str] = None
    notes: Optional[str] = None

    # Relationships
    generated_sentence: "GeneratedSentence" = Relationship(back_populates="practice_entries")
