"""
Sentence template and slot schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class SentenceTemplateResponse(BaseModel):
    """Sentence template response schema."""
    id: int
    template_pattern: str
    description: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SentenceTemplateListResponse(BaseModel):
    """Paginated template list."""
    data: List[SentenceTemplateResponse]
    total: int


class TemplateSlotResponse(BaseModel):
    """Template slot response schema."""
    id: int
    template_id: int
    slot_name: str
    grammatical_role: Optional[str] = None
    part_of_speech: Optional[str] = None
    is_required: bool = True
    order_index: int = 0
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class TemplateSlotListResponse(BaseModel):
    """Paginated slot list."""
    data: List[TemplateSlotResponse]
    total: int


class TemplateSlotImport(BaseModel):
    """A template slot as read from an import file."""
    slot_name: str = Field(..., min_length=1)
    part_of_speech: str
    grammatical_role: Optional[str] = None
    is_required: bool = True
    order_index: int = 0
    notes: Optional[str] = None


class SentenceTemplateImport(BaseModel):
    """A sentence template with its slots and tag names, as read from an import file."""
    template_pattern: str = Field(..., min_length=1)
    description: Optional[str] = None
    is_active: bool = True
    tags: List[str] = Field(default_factory=list, description="Names of tags this template is eligible for")
    slots: List[TemplateSlotImport] = Field(default_factory=list)
