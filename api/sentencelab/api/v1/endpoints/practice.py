"""
Practice history endpoints.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import Optional
from sentencelab.core.database import get_session
from sentencelab.schemas.sentence import (
    PracticeRequest,
    PracticeCreatedResponse,
    PracticeHistoryResponse,
    PracticeHistoryListResponse,
)
from sentencelab.services import practice_service

router = APIRouter(prefix="/practice", tags=["practice"])


@router.post("", response_model=PracticeCreatedResponse)
def record_practice(
    request: PracticeRequest,
    session: Session = Depends(get_session)
):
    """Record one practice of a generated sentence."""
    entry = practice_service.record_practice(
        session,
        request.generated_sentence_id,
        result=request.result,
        notes=request.notes,
    )
    return PracticeCreatedResponse(success=True, id=entry.id)


@router.get("", response_model=PracticeHistoryListResponse)
def get_practice_history(
    generated_sentence_id: Optional[int] = None,
    session: Session = Depends(get_session)
):
    """Get practice history, newest first."""
    entries = practice_service.list_practice_history(session, generated_sentence_id)
    return PracticeHistoryListResponse(
        data=[PracticeHistoryResponse.model_validate(entry) for entry in entries]
    )
