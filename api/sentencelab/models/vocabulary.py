"""
Vocabulary model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sentencelab.models.timestamps import timestamp_field

if TYPE_CHECKING:
    from sentencelab.models.generated_sentence_vocabulary import GeneratedSentenceVocabulary


class Vocabulary(SQLModel, table=True):
    """Vocabulary table - one dictionary entry with its linguistic attributes."""
    __tablename__ = "vocabulary"

    id: Optional[int] = Field(default=None, primary_key=True)
    kanji: Optional[str] = None  # Primary script form
    furigana: Optional[str] = None  # Phonetic guide (kana)
    romaji: Optional[str] = None
    meaning: Optional[str] = None  # English gloss
    part_of_speech: Optional[str] = Field(default=None, index=True)
    topic: Optional[str] = None
    subtopic: Optional[str] = None
    politeness_level: Optional[str] = None
    jlpt_level: Optional[str] = None  # N5 .. N1
    difficulty: Optional[str] = None  # Beginner / Intermediate / Advanced
    notes: Optional[str] = None
    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field()

    # Relationships
    sentence_bindings: List["GeneratedSentenceVocabulary"] = Relationship(back_populates="vocabulary")
