"""
Vocabulary endpoints.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import Optional
from sentencelab.core.database import get_session
from sentencelab.schemas.vocabulary import VocabularyResponse, VocabularyListResponse
from sentencelab.services.vocabulary_service import list_vocabulary
from sentencelab.api.v1.endpoints.utils import validate_pagination

router = APIRouter(prefix="/vocabulary", tags=["vocabulary"])


@router.get("", response_model=VocabularyListResponse)
def get_vocabulary(
    topic: Optional[str] = None,
    subtopic: Optional[str] = None,
    politeness: Optional[str] = None,
    jlpt: Optional[str] = None,
    difficulty: Optional[str] = None,
    part_of_speech: Optional[str] = None,
    limit: int = 20,
    offset: int = 0,
    session: Session = Depends(get_session)
):
    """
    Get vocabulary with optional attribute filters and pagination.

    Args:
        topic: Only entries with this topic
        subtopic: Only entries with this subtopic
        politeness: Only entries with this politeness level
        jlpt: Only entries with this JLPT level (N5 .. N1)
        difficulty: Only entries with this difficulty
        part_of_speech: Only entries with this part of speech
        limit: Page size (1-500, default: 20)
        offset: Rows to skip (default: 0)
    """
    validate_pagination(limit, offset)
    rows, total = list_vocabulary(
        session,
        topic=topic,
        subtopic=subtopic,
        politeness_level=politeness,
        jlpt_level=jlpt,
        difficulty=difficulty,
        part_of_speech=part_of_speech,
        limit=limit,
        offset=offset,
    )
    return VocabularyListResponse(
        data=[VocabularyResponse.model_validate(row) for row in rows],
        total=total,
    )
