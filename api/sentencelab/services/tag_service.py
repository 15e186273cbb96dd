"""
Tag graph service: tag lookups, parent/child navigation and vocabulary scoping.
"""
import logging
from typing import Iterable, List, Optional, Sequence
from sqlmodel import Session, select
from sqlalchemy.orm import aliased

from sentencelab.core.exceptions import NotFoundError
from sentencelab.models import Tag, TagVocabMapping

logger = logging.getLogger(__name__)


def get_tag(session: Session, tag_id: int) -> Tag:
    """
    Get a tag by ID.

    Raises:
        NotFoundError: If no tag with this ID exists
    """
    tag = session.get(Tag, tag_id)
    if not tag:
        raise NotFoundError(f"Tag with id {tag_id} not found")
    return tag


def is_top_level(tag: Tag) -> bool:
    """A tag is top-level when it has no parent."""
    return tag.parent_tag_id is None


def get_top_level_tags(session: Session) -> List[Tag]:
    """Get all tags without a parent, sorted by name."""
    return list(session.exec(
        select(Tag).where(Tag.parent_tag_id.is_(None)).order_by(Tag.name.asc())  # type: ignore[union-attr]
    ).all())


def get_child_tags(session: Session, tag_id: int) -> List[Tag]:
    """Get the direct children of a tag, sorted by name. Grandchildren are not included."""
    return list(session.exec(
        select(Tag).where(Tag.parent_tag_id == tag_id).order_by(Tag.name.asc())  # type: ignore[union-attr]
    ).all())


def search_tags(session: Session, search: Optional[str] = None, tag_type: Optional[str] = None) -> List[Tag]:
    """Get tags filtered by type and by a substring of the name, sorted by name."""
    query = select(Tag)
    if tag_type:
        query = query.where(Tag.type == tag_type)
    if search:
        query = query.where(Tag.name.like(f"%{search}%"))  # type: ignore[union-attr]
    query = query.order_by(Tag.name.asc())  # type: ignore[union-attr]
    return list(session.exec(query).all())


def get_tag_mappings(session: Session, tag_id: int) -> List[TagVocabMapping]:
    """Get the vocabulary topic/subtopic mappings owned by a tag (possibly empty)."""
    return list(session.exec(
        select(TagVocabMapping).where(TagVocabMapping.tag_id == tag_id)
    ).all())


def get_tag_mapping_overview(session: Session) -> List[dict]:
    """
    Get every tag mapping joined with its tag and the tag's parent name.

    Returns:
        List of dicts with tag_id, tag_name, tag_type, parent_tag_name,
        vocab_topic, vocab_subtopic and description, sorted by tag name
    """
    parent = aliased(Tag)
    rows = session.exec(
        select(TagVocabMapping, Tag, parent.name)
        .join(Tag, Tag.id == TagVocabMapping.tag_id)
        .outerjoin(parent, parent.id == Tag.parent_tag_id)
        .order_by(Tag.name.asc(), TagVocabMapping.id.asc())  # type: ignore[union-attr]
    ).all()

    return [
        {
            "tag_id": tag.id,
            "tag_name": tag.name,
            "tag_type": tag.type,
            "parent_tag_name": parent_name,
            "vocab_topic": mapping.vocab_topic,
            "vocab_subtopic": mapping.vocab_subtopic,
            "description": tag.description,
        }
        for mapping, tag, parent_name in rows
    ]


def matches_tag_mapping(vocabulary, mappings: Sequence[TagVocabMapping]) -> bool:
    """
    Check whether a vocabulary entry is in scope for a tag's mappings.

    An empty mapping set accepts everything. Otherwise at least one mapping
    must match: a mapping without subtopic matches on topic alone, a mapping
    with subtopic needs both topic and subtopic to be equal.

    Args:
        vocabulary: Object with topic and subtopic attributes
        mappings: The tag's mappings

    Returns:
        True if the entry may be used for the tag
    """
    if not mappings:
        return True

    for mapping in mappings:
        if not mapping.vocab_topic:
            return True
        if vocabulary.topic != mapping.vocab_topic:
            continue
        if mapping.vocab_subtopic is None:
            return True
        if vocabulary.subtopic == mapping.vocab_subtopic:
            return True
    return False


def filter_by_tag_mappings(candidates: Iterable, mappings: Sequence[TagVocabMapping]) -> list:
    """Keep the candidates accepted by matches_tag_mapping."""
    return [candidate for candidate in candidates if matches_tag_mapping(candidate, mappings)]
