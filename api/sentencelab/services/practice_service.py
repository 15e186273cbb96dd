"""
Practice history service.
"""
# pyright: reportAttributeAccessIssue=false
import logging
from typing import List, Optional
from sqlmodel import Session, select
from sqlalchemy.exc import SQLAlchemyError

from sentencelab.core.exceptions import PersistenceError, ValidationError
from sentencelab.models import PracticeHistory
from sentencelab.services.sentence_service import get_generated_sentence

logger = logging.getLogger(__name__)


def record_practice(
    session: Session,
    generated_sentence_id: Optional[int],
    result: Optional[str] = None,
    notes: Optional[str] = None,
) -> PracticeHistory:
    """
    Append one practice entry for a generated sentence.

    Raises:
        ValidationError: If generated_sentence_id is missing
        NotFoundError: If the sentence does not exist
        PersistenceError: If the insert fails
    """
    if not generated_sentence_id:
        raise ValidationError("generatedSentenceId is required")
    get_generated_sentence(session, generated_sentence_id)

    entry = PracticeHistory(
        generated_sentence_id=generated_sentence_id,
        result=result or None,
        notes=notes or None,
    )
    try:
        session.add(entry)
        session.commit()
        session.refresh(entry)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Failed to record practice for sentence %d: %s", generated_sentence_id, str(e), exc_info=True)
        raise PersistenceError(f"Failed to record practice: {str(e)}") from e

    logger.info("Recorded practice %d for sentence %d", entry.id, generated_sentence_id)
    return entry


def list_practice_history(session: Session, generated_sentence_id: Optional[int] = None) -> List[PracticeHistory]:
    """Get practice entries, newest first, optionally for a single sentence."""
    query = select(PracticeHistory)
    if generated_sentence_id:
        query = query.where(PracticeHistory.generated_sentence_id == generated_sentence_id)
    query = query.order_by(PracticeHistory.practiced_at.desc(), PracticeHistory.id.desc())
    return list(session.exec(query).all())
