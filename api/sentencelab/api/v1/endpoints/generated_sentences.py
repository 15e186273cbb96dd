"""
Generated sentence library endpoints.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import Optional
from sentencelab.core.database import get_session
from sentencelab.schemas.sentence import (
    GeneratedSentenceResponse,
    GeneratedSentenceListResponse,
    FavoriteRequest,
    FavoriteResponse,
)
from sentencelab.services import sentence_service
from sentencelab.api.v1.endpoints.utils import validate_pagination

router = APIRouter(prefix="/generated-sentences", tags=["generated-sentences"])


@router.get("", response_model=GeneratedSentenceListResponse)
def get_generated_sentences(
    tag_id: Optional[int] = None,
    politeness: Optional[str] = None,
    difficulty: Optional[str] = None,
    favorite: Optional[str] = None,  # "1" or "true" keeps favorites only
    limit: int = 20,
    offset: int = 0,
    session: Session = Depends(get_session)
):
    """Get generated sentences, newest first, with optional filters."""
    validate_pagination(limit, offset)
    rows, total = sentence_service.list_generated_sentences(
        session,
        tag_id=tag_id,
        politeness_level=politeness,
        difficulty=difficulty,
        favorite_only=favorite in ("1", "true"),
        limit=limit,
        offset=offset,
    )
    return GeneratedSentenceListResponse(
        data=[GeneratedSentenceResponse(**row) for row in rows],
        total=total,
    )


@router.post("/{sentence_id}/favorite", response_model=FavoriteResponse)
def set_favorite(
    sentence_id: int,
    request: FavoriteRequest,
    session: Session = Depends(get_session)
):
    """Set or clear the favorite flag of a generated sentence."""
    sentence = sentence_service.set_favorite(session, sentence_id, request.is_favorite)
    return FavoriteResponse(success=True, id=sentence.id, is_favorite=int(sentence.is_favorite))
