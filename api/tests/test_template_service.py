import pytest

from sentencelab.core.exceptions import (
    NoActiveTemplatesError,
    NotFoundError,
    TemplateHasNoSlotsError,
    ValidationError,
)
from sentencelab.models import Tagging, TemplateSlot
from sentencelab.services import template_service
from tests.utils import create_tag, create_template


def test_explicit_template_is_used(db_session, first_choice):
    tag = create_tag(db_session)
    template = create_template(db_session, "{a}", slots=[("a", "noun")])

    resolved, slots = template_service.resolve_template(db_session, tag.id, template.id, rng=first_choice)
    assert resolved.id == template.id
    assert [s.slot_name for s in slots] == ["a"]


def test_explicit_template_missing(db_session):
    tag = create_tag(db_session)
    with pytest.raises(NotFoundError, match="Template not found"):
        template_service.resolve_template(db_session, tag.id, 12345)


def test_explicit_inactive_template_is_rejected(db_session):
    tag = create_tag(db_session)
    template = create_template(db_session, "{a}", slots=[("a", "noun")], tags=[tag], is_active=False)
    with pytest.raises(ValidationError):
        template_service.resolve_template(db_session, tag.id, template.id)


def test_random_choice_only_among_active_tagged_templates(db_session, first_choice, last_choice):
    tag = create_tag(db_session)
    other = create_tag(db_session, "Other")
    create_template(db_session, "{a}", slots=[("a", "noun")], tags=[tag], is_active=False)
    first = create_template(db_session, "{a}!", slots=[("a", "noun")], tags=[tag])
    create_template(db_session, "{a}?", slots=[("a", "noun")], tags=[other])
    last = create_template(db_session, "{a}。", slots=[("a", "noun")], tags=[tag, other])

    assert [t.id for t in template_service.get_active_templates_for_tag(db_session, tag.id)] == [first.id, last.id]
    assert template_service.resolve_template(db_session, tag.id, rng=first_choice)[0].id == first.id
    assert template_service.resolve_template(db_session, tag.id, rng=last_choice)[0].id == last.id


def test_taggings_of_other_target_types_are_ignored(db_session):
    tag = create_tag(db_session)
    template = create_template(db_session, "{a}", slots=[("a", "noun")])
    db_session.add(Tagging(tag_id=tag.id, target_type="vocabulary", target_id=template.id))
    db_session.commit()

    with pytest.raises(NoActiveTemplatesError):
        template_service.resolve_template(db_session, tag.id)


def test_tag_without_templates(db_session):
    tag = create_tag(db_session)
    with pytest.raises(NoActiveTemplatesError, match="No active templates"):
        template_service.resolve_template(db_session, tag.id)


def test_template_without_slots(db_session):
    tag = create_tag(db_session)
    create_template(db_session, "こんにちは。", tags=[tag])
    with pytest.raises(TemplateHasNoSlotsError):
        template_service.resolve_template(db_session, tag.id)


def test_slots_ordered_by_order_index_then_id(db_session):
    template = create_template(db_session, "{c}{a}{b}")
    for name, order in [("b", 1), ("c", 0), ("a", 1)]:
        db_session.add(TemplateSlot(template_id=template.id, slot_name=name, part_of_speech="noun", order_index=order))
    db_session.commit()

    slots = template_service.get_template_slots(db_session, template.id)
    assert [s.slot_name for s in slots] == ["c", "b", "a"]


def test_list_templates_by_tag(db_session):
    tag = create_tag(db_session)
    tagged = create_template(db_session, "{a}", slots=[("a", "noun")], tags=[tag])
    create_template(db_session, "{b}", slots=[("b", "noun")])

    rows, total = template_service.list_templates(db_session, tag_id=tag.id)
    assert total == 1
    assert [t.id for t in rows] == [tagged.id]

    rows, total = template_service.list_templates(db_session, limit=1)
    assert total == 2
    assert len(rows) == 1
