"""
Sentence generation service.

Generation runs in three phases:
1. Resolve a template for the tag (template_service)
2. Fill every slot with a random matching vocabulary entry
3. Render, aggregate and persist the sentence with its slot bindings

Phases 1 and 2 only read. Phase 3 writes the sentence and all of its bindings
in one transaction, so a failed generation leaves no rows behind.
"""
# pyright: reportAttributeAccessIssue=false
import logging
import random
from typing import List, Optional, Sequence, Tuple
from sqlmodel import Session
from sqlalchemy.exc import SQLAlchemyError

from sentencelab.core.exceptions import PersistenceError, UnsatisfiableSlotError
from sentencelab.models import (
    DisplayField,
    GeneratedSentence,
    GeneratedSentenceVocabulary,
    TagVocabMapping,
    TemplateSlot,
    Vocabulary,
)
from sentencelab.schemas.generation import (
    GenerateSentenceRequest,
    GeneratedSentenceResult,
    SentenceToken,
)
from sentencelab.services import aggregation_service, tag_service, template_service
from sentencelab.services.vocabulary_service import find_slot_candidates
from sentencelab.utils.text_utils import display_text, render_pattern

logger = logging.getLogger(__name__)

SlotChoice = Tuple[TemplateSlot, Vocabulary]


def pick_random(candidates: Sequence, rng: Optional[random.Random] = None):
    """Pick one candidate uniformly at random; None for an empty sequence."""
    if not candidates:
        return None
    return (rng or random).choice(candidates)


def fill_slots(
    session: Session,
    slots: Sequence[TemplateSlot],
    mappings: Sequence[TagVocabMapping],
    difficulty: Optional[str] = None,
    politeness_level: Optional[str] = None,
    jlpt_level: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> List[SlotChoice]:
    """
    Choose a vocabulary entry for each slot.

    Slots are filled in the order given. Each choice is independent, so the
    same entry may fill several slots.

    Args:
        session: Database session
        slots: Template slots in fill order
        mappings: Vocabulary mappings of the source tag
        difficulty: Optional difficulty constraint
        politeness_level: Optional politeness constraint
        jlpt_level: Optional JLPT constraint
        rng: Random source

    Returns:
        List of (slot, chosen vocabulary) in slot order

    Raises:
        UnsatisfiableSlotError: On the first slot without candidates
    """
    choices: List[SlotChoice] = []
    for slot in slots:
        raw_candidates = find_slot_candidates(
            session,
            slot.part_of_speech,
            difficulty=difficulty,
            politeness_level=politeness_level,
            jlpt_level=jlpt_level,
        )
        candidates = tag_service.filter_by_tag_mappings(raw_candidates, mappings)

        if not candidates:
            logger.info(
                "No candidates for slot %r (pos=%r, difficulty=%r, politeness=%r, jlpt=%r)",
                slot.slot_name, slot.part_of_speech, difficulty, politeness_level, jlpt_level,
            )
            raise UnsatisfiableSlotError(slot.slot_name)

        choices.append((slot, pick_random(candidates, rng)))
    return choices


def build_token(slot: TemplateSlot, vocabulary: Vocabulary, display_field: DisplayField) -> SentenceToken:
    """Token describing one filled slot."""
    return SentenceToken(
        slot_name=slot.slot_name,
        vocabulary_id=vocabulary.id,
        part_of_speech=vocabulary.part_of_speech,
        kanji=vocabulary.kanji,
        furigana=vocabulary.furigana,
        romaji=vocabulary.romaji,
        meaning=vocabulary.meaning,
        topic=vocabulary.topic,
        subtopic=vocabulary.subtopic,
        politeness_level=vocabulary.politeness_level,
        jlpt_level=vocabulary.jlpt_level,
        difficulty=vocabulary.difficulty,
        display=display_text(vocabulary, display_field),
    )


def persist_generated_sentence(
    session: Session,
    sentence: GeneratedSentence,
    choices: Sequence[SlotChoice],
) -> GeneratedSentence:
    """
    Insert a generated sentence and one binding per slot as a single unit.

    Raises:
        PersistenceError: If the store rejects the write; nothing is kept
    """
    try:
        session.add(sentence)
        session.flush()  # Flush to get the sentence ID

        for slot, vocabulary in choices:
            session.add(GeneratedSentenceVocabulary(
                generated_sentence_id=sentence.id,
                vocabulary_id=vocabulary.id,
                slot_name=slot.slot_name,
            ))

        session.commit()
        session.refresh(sentence)
        return sentence
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Failed to save generated sentence: %s", str(e), exc_info=True)
        raise PersistenceError(f"Failed to save generated sentence: {str(e)}") from e


def generate_sentence(
    session: Session,
    request: GenerateSentenceRequest,
    rng: Optional[random.Random] = None,
) -> GeneratedSentenceResult:
    """
    Generate, store and return one sentence for a tag.

    Args:
        session: Database session
        request: Tag, optional template, constraints and display field
        rng: Random source for template and vocabulary choices

    Returns:
        GeneratedSentenceResult with the rendered sentence, aggregates and tokens

    Raises:
        NotFoundError: Unknown tag or explicit template
        ValidationError: No usable template, no slots, or an unsatisfiable slot
        PersistenceError: The store failed while saving
    """
    tag = tag_service.get_tag(session, request.tag_id)
    template, slots = template_service.resolve_template(
        session, tag.id, template_id=request.template_id, rng=rng
    )
    mappings = tag_service.get_tag_mappings(session, tag.id)

    choices = fill_slots(
        session,
        slots,
        mappings,
        difficulty=request.difficulty,
        politeness_level=request.politeness_level,
        jlpt_level=request.jlpt_level,
        rng=rng,
    )

    tokens = [build_token(slot, vocabulary, request.display_field) for slot, vocabulary in choices]
    japanese_sentence = render_pattern(
        template.template_pattern,
        {token.slot_name: token.display for token in tokens},
    )

    used_words = [vocabulary for _, vocabulary in choices]
    sentence = GeneratedSentence(
        template_id=template.id,
        japanese_sentence=japanese_sentence,
        english_sentence=None,
        politeness_level=aggregation_service.aggregate_politeness(used_words),
        jlpt_level=aggregation_service.aggregate_jlpt(used_words),
        difficulty=aggregation_service.aggregate_difficulty(used_words),
        source_tag_id=tag.id,
        is_favorite=False,
    )
    sentence = persist_generated_sentence(session, sentence, choices)

    logger.info(
        "Generated sentence %d from template %d for tag %d (%d slots)",
        sentence.id, template.id, tag.id, len(tokens),
    )

    return GeneratedSentenceResult(
        id=sentence.id,
        template_id=template.id,
        tag_id=tag.id,
        japanese_sentence=sentence.japanese_sentence,
        english_sentence=sentence.english_sentence,
        politeness_level=sentence.politeness_level,
        jlpt_level=sentence.jlpt_level,
        difficulty=sentence.difficulty,
        tokens=tokens,
    )
