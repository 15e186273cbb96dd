"""Utility helpers for test factories."""

from __future__ import annotations

from sqlmodel import Session, select, func

from sentencelab.models import (
    GeneratedSentence,
    GeneratedSentenceVocabulary,
    SentenceTemplate,
    Tag,
    Tagging,
    TaggingTargetType,
    TagVocabMapping,
    TemplateSlot,
    Vocabulary,
)


def create_tag(db: Session, name: str = "Food", parent: Tag | None = None, **kwargs) -> Tag:
    tag = Tag(name=name, parent_tag_id=parent.id if parent else None, **kwargs)
    db.add(tag)
    db.commit()
    db.refresh(tag)
    return tag


def add_mapping(db: Session, tag: Tag, topic: str, subtopic: str | None = None) -> TagVocabMapping:
    mapping = TagVocabMapping(tag_id=tag.id, vocab_topic=topic, vocab_subtopic=subtopic)
    db.add(mapping)
    db.commit()
    db.refresh(mapping)
    return mapping


def create_vocabulary(db: Session, **kwargs) -> Vocabulary:
    defaults = {
        "kanji": None,
        "furigana": None,
        "romaji": None,
        "meaning": None,
        "part_of_speech": "noun",
    }
    defaults.update(kwargs)
    vocab = Vocabulary(**defaults)
    db.add(vocab)
    db.commit()
    db.refresh(vocab)
    return vocab


def create_template(
    db: Session,
    pattern: str,
    slots: list[tuple[str, str | None]] | None = None,
    tags: list[Tag] | None = None,
    is_active: bool = True,
) -> SentenceTemplate:
    """Create a template with slots given as (slot_name, part_of_speech) in fill order."""
    template = SentenceTemplate(template_pattern=pattern, is_active=is_active)
    db.add(template)
    db.flush()

    for index, (slot_name, part_of_speech) in enumerate(slots or []):
        db.add(TemplateSlot(
            template_id=template.id,
            slot_name=slot_name,
            part_of_speech=part_of_speech,
            order_index=index,
        ))
    for tag in tags or []:
        db.add(Tagging(tag_id=tag.id, target_type=TaggingTargetType.TEMPLATE.value, target_id=template.id))

    db.commit()
    db.refresh(template)
    return template


def count_generated_rows(db: Session) -> tuple[int, int]:
    """Return (generated sentences, slot bindings) row counts."""
    sentences = db.exec(select(func.count()).select_from(GeneratedSentence)).one()
    bindings = db.exec(select(func.count()).select_from(GeneratedSentenceVocabulary)).one()
    return sentences, bindings
