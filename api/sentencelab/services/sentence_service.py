"""
Generated sentence service: sentence library queries and favorite state.
"""
# pyright: reportAttributeAccessIssue=false
import logging
from typing import List, Optional, Tuple
from sqlmodel import Session, select, func
from sqlalchemy.exc import SQLAlchemyError

from sentencelab.core.exceptions import NotFoundError, PersistenceError, ValidationError
from sentencelab.models import GeneratedSentence, Tag

logger = logging.getLogger(__name__)


def get_generated_sentence(session: Session, sentence_id: int) -> GeneratedSentence:
    """
    Get a generated sentence by ID.

    Raises:
        ValidationError: If the ID is not a positive integer
        NotFoundError: If no sentence with this ID exists
    """
    if sentence_id is None or sentence_id < 1:
        raise ValidationError("Invalid id")
    sentence = session.get(GeneratedSentence, sentence_id)
    if not sentence:
        raise NotFoundError("Sentence not found")
    return sentence


def set_favorite(session: Session, sentence_id: int, is_favorite: bool) -> GeneratedSentence:
    """
    Set the favorite flag of one generated sentence.

    Setting the flag to its current value is a no-op, so repeating the call
    leaves the same state.

    Raises:
        ValidationError: If the ID is not a positive integer
        NotFoundError: If no sentence with this ID exists
        PersistenceError: If the update fails
    """
    sentence = get_generated_sentence(session, sentence_id)
    sentence.is_favorite = bool(is_favorite)

    try:
        session.add(sentence)
        session.commit()
        session.refresh(sentence)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Failed to update favorite for sentence %d: %s", sentence_id, str(e), exc_info=True)
        raise PersistenceError(f"Failed to update favorite: {str(e)}") from e

    logger.info("Sentence %d favorite set to %s", sentence_id, sentence.is_favorite)
    return sentence


def apply_sentence_filters(
    query,
    tag_id: Optional[int] = None,
    politeness_level: Optional[str] = None,
    difficulty: Optional[str] = None,
    favorite_only: bool = False,
):
    """Apply sentence library filters to a query over GeneratedSentence."""
    if tag_id:
        query = query.where(GeneratedSentence.source_tag_id == tag_id)
    if politeness_level:
        query = query.where(GeneratedSentence.politeness_level == politeness_level)
    if difficulty:
        query = query.where(GeneratedSentence.difficulty == difficulty)
    if favorite_only:
        query = query.where(GeneratedSentence.is_favorite == True)  # noqa: E712
    return query


def list_generated_sentences(
    session: Session,
    tag_id: Optional[int] = None,
    politeness_level: Optional[str] = None,
    difficulty: Optional[str] = None,
    favorite_only: bool = False,
    limit: int = 20,
    offset: int = 0,
) -> Tuple[List[dict], int]:
    """
    Get a page of generated sentences, newest first, with their tag names.

    Returns:
        Tuple of (page rows as dicts, total matching rows)
    """
    filters = dict(
        tag_id=tag_id,
        politeness_level=politeness_level,
        difficulty=difficulty,
        favorite_only=favorite_only,
    )
    total = session.exec(
        apply_sentence_filters(select(func.count()).select_from(GeneratedSentence), **filters)
    ).one()

    query = apply_sentence_filters(
        select(GeneratedSentence, Tag.name).outerjoin(Tag, Tag.id == GeneratedSentence.source_tag_id),
        **filters,
    )
    query = query.order_by(
        GeneratedSentence.created_at.desc(),
        GeneratedSentence.id.desc(),
    ).offset(offset).limit(limit)

    rows = []
    for sentence, tag_name in session.exec(query).all():
        data = sentence.model_dump()
        data["tag_name"] = tag_name
        data["is_favorite"] = int(sentence.is_favorite)
        rows.append(data)
    return rows, total
