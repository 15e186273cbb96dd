"""
Generated sentence and practice history schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class GeneratedSentenceResponse(BaseModel):
    """Generated sentence row as listed in the sentence library."""
    id: int
    template_id: int
    japanese_sentence: str
    english_sentence: Optional[str] = None
    politeness_level: Optional[str] = None
    jlpt_level: Optional[str] = None
    difficulty: Optional[str] = None
    source_tag_id: Optional[int] = None
    tag_name: Optional[str] = None
    is_favorite: int = 0
    created_at: Optional[datetime] = None


class GeneratedSentenceListResponse(BaseModel):
    """Paginated generated sentence list."""
    data: List[GeneratedSentenceResponse]
    total: int


class FavoriteRequest(BaseModel):
    """Request to set the favorite flag of a generated sentence."""
    is_favorite: bool = Field(..., alias="isFavorite")

    class Config:
        populate_by_name = True


class FavoriteResponse(BaseModel):
    """Response of a favorite toggle."""
    success: bool = True
    id: int
    is_favorite: int


class PracticeRequest(BaseModel):
    """Request to record one practice of a generated sentence."""
    generated_sentence_id: Optional[int] = Field(None, alias="generatedSentenceId")
    result: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        populate_by_name = True


class PracticeCreatedResponse(BaseModel):
    """Response after recording a practice entry."""
    success: bool = True
    id: int


class PracticeHistoryResponse(BaseModel):
    """Practice history entry."""
    id: int
    generated_sentence_id: int
    practiced_at: Optional[datetime] = None
    result: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class PracticeHistoryListResponse(BaseModel):
    """Practice history list."""
    data: List[PracticeHistoryResponse]
