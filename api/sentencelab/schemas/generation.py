"""
Sentence generation schemas.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from sentencelab.models.enums import DisplayField
from sentencelab.schemas.utils import blank_to_none


class GenerateSentenceRequest(BaseModel):
    """Request to generate one sentence for a tag."""
    tag_id: int = Field(..., alias="tagId", gt=0, description="Tag (or sub tag) to generate for")
    template_id: Optional[int] = Field(None, alias="templateId", gt=0, description="Use this template instead of a random one")
    difficulty: Optional[str] = None
    jlpt_level: Optional[str] = Field(None, alias="jlptLevel")
    politeness_level: Optional[str] = Field(None, alias="politenessLevel")
    display_field: DisplayField = Field(DisplayField.FURIGANA, alias="displayField")

    @field_validator('difficulty', 'jlpt_level', 'politeness_level', mode='before')
    @classmethod
    def blank_constraint_is_missing(cls, v):
        """An empty constraint means no restriction on that axis."""
        return blank_to_none(v)

    @field_validator('display_field', mode='before')
    @classmethod
    def default_display_field(cls, v):
        """Null display field falls back to furigana."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DisplayField.FURIGANA
        return v

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "tagId": 3,
                "difficulty": "Beginner",
                "jlptLevel": None,
                "politenessLevel": "Polite",
                "displayField": "furigana"
            }
        }


class SentenceToken(BaseModel):
    """One filled slot of a generated sentence."""
    slot_name: str = Field(..., alias="slotName")
    vocabulary_id: int = Field(..., alias="vocabularyId")
    part_of_speech: Optional[str] = Field(None, alias="partOfSpeech")
    kanji: Optional[str] = None
    furigana: Optional[str] = None
    romaji: Optional[str] = None
    meaning: Optional[str] = None
    topic: Optional[str] = None
    subtopic: Optional[str] = None
    politeness_level: Optional[str] = Field(None, alias="politenessLevel")
    jlpt_level: Optional[str] = Field(None, alias="jlptLevel")
    difficulty: Optional[str] = None
    display: str

    class Config:
        populate_by_name = True


class GeneratedSentenceResult(BaseModel):
    """Response of a successful generation."""
    id: int
    template_id: int = Field(..., alias="templateId")
    tag_id: int = Field(..., alias="tagId")
    japanese_sentence: str = Field(..., alias="japaneseSentence")
    english_sentence: Optional[str] = Field(None, alias="englishSentence")
    politeness_level: Optional[str] = Field(None, alias="politenessLevel")
    jlpt_level: Optional[str] = Field(None, alias="jlptLevel")
    difficulty: Optional[str] = None
    tokens: List[SentenceToken]

    class Config:
        populate_by_name = True
