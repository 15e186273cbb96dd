"""
TemplateSlot model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from sentencelab.models.sentence_template import SentenceTemplate


class TemplateSlot(SQLModel, table=True):
    """Template slot table - a named, typed blank of a template."""
    __tablename__ = "template_slots"
    __table_args__ = (
        UniqueConstraint("template_id", "slot_name", name="uq_template_slot_name"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    template_id: int = Field(
        sa_column=Column(Integer, ForeignKey("sentence_templates.id", ondelete="CASCADE"), nullable=False)
    )
    slot_name: str  # Placeholder key in the template pattern
    grammatical_role: Optional[str] = None
    part_of_speech: Optional[str] = None  # Part of speech the filling word must have
    is_required: bool = Field(default=True)
    order_index: int = Field(default=0)
    notes: Optional[str] = None

    # Relationships
    template: "SentenceTemplate" = Relationship(back_populates="slots")
