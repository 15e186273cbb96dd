"""
Vocabulary schemas.
"""
from pydantic import BaseModel, model_validator, field_validator
from typing import List, Optional
from datetime import datetime
from sentencelab.schemas.utils import blank_to_none


class VocabularyResponse(BaseModel):
    """Vocabulary entry response schema."""
    id: int
    kanji: Optional[str] = None
    furigana: Optional[str] = None
    romaji: Optional[str] = None
    meaning: Optional[str] = None
    part_of_speech: Optional[str] = None
    topic: Optional[str] = None
    subtopic: Optional[str] = None
    politeness_level: Optional[str] = None
    jlpt_level: Optional[str] = None
    difficulty: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class VocabularyListResponse(BaseModel):
    """Paginated vocabulary list."""
    data: List[VocabularyResponse]
    total: int


class VocabularyImport(BaseModel):
    """A vocabulary entry as read from an import file."""
    kanji: Optional[str] = None
    furigana: Optional[str] = None
    romaji: Optional[str] = None
    meaning: Optional[str] = None
    part_of_speech: str
    topic: Optional[str] = None
    subtopic: Optional[str] = None
    politeness_level: Optional[str] = None
    jlpt_level: Optional[str] = None
    difficulty: Optional[str] = None
    notes: Optional[str] = None

    @field_validator(
        'kanji', 'furigana', 'romaji', 'meaning', 'topic', 'subtopic',
        'politeness_level', 'jlpt_level', 'difficulty', mode='before'
    )
    @classmethod
    def strip_blank(cls, v):
        """Store blank strings as null."""
        return blank_to_none(v)

    @model_validator(mode='after')
    def require_surface_form(self):
        """At least one of kanji, furigana, romaji or meaning must be present."""
        if not any([self.kanji, self.furigana, self.romaji, self.meaning]):
            raise ValueError("vocabulary entry needs at least one of kanji, furigana, romaji or meaning")
        return self
