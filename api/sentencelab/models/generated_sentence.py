"""
GeneratedSentence model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sentencelab.models.timestamps import timestamp_field

if TYPE_CHECKING:
    from sentencelab.models.generated_sentence_vocabulary import GeneratedSentenceVocabulary
    from sentencelab.models.practice_history import PracticeHistory


class GeneratedSentence(SQLModel, table=True):
    """Generated sentence table - one row per successful generation."""
    __tablename__ = "generated_sentences"

    id: Optional[int] = Field(default=None, primary_key=True)
    template_id: int = Field(foreign_key="sentence_templates.id")
    japanese_sentence: str
    english_sentence: Optional[str] = None  # Translation is not generated
    politeness_level: Optional[str] = None
    jlpt_level: Optional[str] = None
    difficulty: Optional[str] = None
    source_tag_id: Optional[int] = Field(default=None, foreign_key="tags.id")
    is_favorite: bool = Field(default=False)
    created_at: datetime = timestamp_field()

    # Relationships
    vocabulary_bindings: List["GeneratedSentenceVocabulary"] = Relationship(
        back_populates="generated_sentence",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
    practice_entries: List["PracticeHistory"] = Relationship(
        back_populates="generated_sentence",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
