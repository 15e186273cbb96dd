"""
Vocabulary service for filtered vocabulary queries.
"""
# pyright: reportAttributeAccessIssue=false
from sqlmodel import Session, select, func
from typing import List, Optional, Tuple

from sentencelab.models import Vocabulary


# ============================================================================
# Query Filter Building Helpers
# ============================================================================

def apply_equality_filter(query, column, value: Optional[str]):
    """Restrict query to column == value when a value is supplied; no-op otherwise."""
    if value:
        return query.where(column == value)
    return query


def apply_vocabulary_filters(
    query,
    topic: Optional[str] = None,
    subtopic: Optional[str] = None,
    politeness_level: Optional[str] = None,
    jlpt_level: Optional[str] = None,
    difficulty: Optional[str] = None,
    part_of_speech: Optional[str] = None,
):
    """Apply every supplied attribute filter to a vocabulary query."""
    query = apply_equality_filter(query, Vocabulary.topic, topic)
    query = apply_equality_filter(query, Vocabulary.subtopic, subtopic)
    query = apply_equality_filter(query, Vocabulary.politeness_level, politeness_level)
    query = apply_equality_filter(query, Vocabulary.jlpt_level, jlpt_level)
    query = apply_equality_filter(query, Vocabulary.difficulty, difficulty)
    query = apply_equality_filter(query, Vocabulary.part_of_speech, part_of_speech)
    return query


# ============================================================================
# Queries
# ============================================================================

def find_slot_candidates(
    session: Session,
    part_of_speech: Optional[str],
    difficulty: Optional[str] = None,
    politeness_level: Optional[str] = None,
    jlpt_level: Optional[str] = None,
) -> List[Vocabulary]:
    """
    Get vocabulary that can fill a slot.

    The part of speech filter is always applied; a slot without a part of
    speech has no candidates. Difficulty, politeness and JLPT filters are only
    applied when supplied.

    Returns:
        Candidates ordered by id
    """
    if not part_of_speech:
        return []

    query = select(Vocabulary).where(Vocabulary.part_of_speech == part_of_speech)
    query = apply_vocabulary_filters(
        query,
        politeness_level=politeness_level,
        jlpt_level=jlpt_level,
        difficulty=difficulty,
    )
    query = query.order_by(Vocabulary.id.asc())
    return list(session.exec(query).all())


def list_vocabulary(
    session: Session,
    topic: Optional[str] = None,
    subtopic: Optional[str] = None,
    politeness_level: Optional[str] = None,
    jlpt_level: Optional[str] = None,
    difficulty: Optional[str] = None,
    part_of_speech: Optional[str] = None,
    limit: int = 20,
    offset: int = 0,
) -> Tuple[List[Vocabulary], int]:
    """
    Get a page of vocabulary, most recently updated first.

    Returns:
        Tuple of (page rows, total matching rows)
    """
    filters = dict(
        topic=topic,
        subtopic=subtopic,
        politeness_level=politeness_level,
        jlpt_level=jlpt_level,
        difficulty=difficulty,
        part_of_speech=part_of_speech,
    )

    count_query = apply_vocabulary_filters(select(func.count()).select_from(Vocabulary), **filters)
    total = session.exec(count_query).one()

    query = apply_vocabulary_filters(select(Vocabulary), **filters)
    query = query.order_by(Vocabulary.updated_at.desc(), Vocabulary.id.desc()).offset(offset).limit(limit)
    return list(session.exec(query).all()), total
