"""
SentenceTemplate model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sentencelab.models.timestamps import timestamp_field

if TYPE_CHECKING:
    from sentencelab.models.template_slot import TemplateSlot


class SentenceTemplate(SQLModel, table=True):
    """Sentence template table - a pattern with {slotName} placeholders."""
    __tablename__ = "sentence_templates"

    id: Optional[int] = Field(default=None, primary_key=True)
    template_pattern: str
    description: Optional[str] = None
    is_active: bool = Field(default=True)
    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field()

    # Relationships
    slots: List["TemplateSlot"] = Relationship(
        back_populates="template",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
