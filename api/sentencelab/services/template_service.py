"""
Template service: template lookups and template resolution for generation.
"""
import logging
import random
from typing import List, Optional, Tuple
from sqlmodel import Session, select, func

from sentencelab.core.exceptions import (
    NotFoundError,
    ValidationError,
    NoActiveTemplatesError,
    TemplateHasNoSlotsError,
)
from sentencelab.models import SentenceTemplate, TemplateSlot, Tagging, TaggingTargetType

logger = logging.getLogger(__name__)


def _tagged_template_ids(tag_id: int):
    """Subquery of template ids linked to a tag."""
    return select(Tagging.target_id).where(
        Tagging.tag_id == tag_id,
        Tagging.target_type == TaggingTargetType.TEMPLATE.value,
    )


def get_template_slots(session: Session, template_id: int) -> List[TemplateSlot]:
    """Get a template's slots in fill order (order_index, then id)."""
    return list(session.exec(
        select(TemplateSlot)
        .where(TemplateSlot.template_id == template_id)
        .order_by(TemplateSlot.order_index.asc(), TemplateSlot.id.asc())  # type: ignore[union-attr]
    ).all())


def get_active_templates_for_tag(session: Session, tag_id: int) -> List[SentenceTemplate]:
    """Get the active templates linked to a tag, ordered by id."""
    return list(session.exec(
        select(SentenceTemplate)
        .where(
            SentenceTemplate.id.in_(_tagged_template_ids(tag_id)),  # type: ignore[union-attr]
            SentenceTemplate.is_active == True,  # noqa: E712
        )
        .order_by(SentenceTemplate.id.asc())  # type: ignore[union-attr]
    ).all())


def resolve_template(
    session: Session,
    tag_id: int,
    template_id: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[SentenceTemplate, List[TemplateSlot]]:
    """
    Resolve the template to generate from, and its ordered slots.

    With template_id the template is looked up directly. Without it, one of
    the tag's active templates is chosen uniformly at random.

    Args:
        session: Database session
        tag_id: Tag to pick a template for
        template_id: Optional explicit template
        rng: Random source (defaults to the random module)

    Returns:
        Tuple of (template, slots in fill order)

    Raises:
        NotFoundError: If template_id does not exist
        ValidationError: If the explicit template is inactive
        NoActiveTemplatesError: If the tag has no active template
        TemplateHasNoSlotsError: If the template has no slots
    """
    rng = rng or random

    if template_id is not None:
        template = session.get(SentenceTemplate, template_id)
        if not template:
            raise NotFoundError("Template not found")
        if not template.is_active:
            raise ValidationError(f"Template {template_id} is not active")
    else:
        candidates = get_active_templates_for_tag(session, tag_id)
        if not candidates:
            raise NoActiveTemplatesError()
        template = rng.choice(candidates)
        logger.debug("Picked template %d out of %d for tag %d", template.id, len(candidates), tag_id)

    slots = get_template_slots(session, template.id)
    if not slots:
        raise TemplateHasNoSlotsError()

    return template, slots


def list_templates(
    session: Session,
    tag_id: Optional[int] = None,
    limit: int = 20,
    offset: int = 0,
) -> Tuple[List[SentenceTemplate], int]:
    """
    Get a page of templates, optionally only those linked to a tag.

    Returns:
        Tuple of (page rows, total matching rows)
    """
    count_query = select(func.count()).select_from(SentenceTemplate)
    query = select(SentenceTemplate)
    if tag_id:
        condition = SentenceTemplate.id.in_(_tagged_template_ids(tag_id))  # type: ignore[union-attr]
        count_query = count_query.where(condition)
        query = query.where(condition)

    total = session.exec(count_query).one()
    query = query.order_by(
        SentenceTemplate.updated_at.desc(),  # type: ignore[union-attr]
        SentenceTemplate.id.desc(),  # type: ignore[union-attr]
    ).offset(offset).limit(limit)
    return list(session.exec(query).all()), total


def list_template_slots(
    session: Session,
    template_id: int,
    limit: int = 100,
    offset: int = 0,
) -> Tuple[List[TemplateSlot], int]:
    """
    Get a page of a template's slots in fill order.

    Returns:
        Tuple of (page rows, total slots of the template)
    """
    total = session.exec(
        select(func.count()).select_from(TemplateSlot).where(TemplateSlot.template_id == template_id)
    ).one()
    rows = session.exec(
        select(TemplateSlot)
        .where(TemplateSlot.template_id == template_id)
        .order_by(TemplateSlot.order_index.asc(), TemplateSlot.id.asc())  # type: ignore[union-attr]
        .offset(offset)
        .limit(limit)
    ).all()
    return list(rows), total
