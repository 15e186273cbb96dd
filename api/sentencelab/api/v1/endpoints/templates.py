"""
Sentence template and template slot endpoints.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import Optional
from sentencelab.core.database import get_session
from sentencelab.core.exceptions import ValidationError
from sentencelab.schemas.template import (
    SentenceTemplateResponse,
    SentenceTemplateListResponse,
    TemplateSlotResponse,
    TemplateSlotListResponse,
)
from sentencelab.services import template_service
from sentencelab.api.v1.endpoints.utils import validate_pagination

router = APIRouter(tags=["templates"])


@router.get("/sentence-templates", response_model=SentenceTemplateListResponse)
def get_sentence_templates(
    tag_id: Optional[int] = None,
    limit: int = 20,
    offset: int = 0,
    session: Session = Depends(get_session)
):
    """Get templates, most recently updated first, optionally only those linked to tag_id."""
    validate_pagination(limit, offset)
    rows, total = template_service.list_templates(session, tag_id=tag_id, limit=limit, offset=offset)
    return SentenceTemplateListResponse(
        data=[SentenceTemplateResponse.model_validate(row) for row in rows],
        total=total,
    )


@router.get("/template-slots", response_model=TemplateSlotListResponse)
def get_template_slots(
    template_id: Optional[int] = None,
    limit: int = 100,
    offset: int = 0,
    session: Session = Depends(get_session)
):
    """Get the slots of a template in fill order. template_id is required."""
    if not template_id:
        raise ValidationError("template_id is required")
    validate_pagination(limit, offset)
    rows, total = template_service.list_template_slots(session, template_id, limit=limit, offset=offset)
    return TemplateSlotListResponse(
        data=[TemplateSlotResponse.model_validate(row) for row in rows],
        total=total,
    )
