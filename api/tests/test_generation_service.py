import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from sentencelab.core.exceptions import (
    NoActiveTemplatesError,
    NotFoundError,
    PersistenceError,
    UnsatisfiableSlotError,
)
from sentencelab.models import GeneratedSentence, GeneratedSentenceVocabulary
from sentencelab.schemas.generation import GenerateSentenceRequest
from sentencelab.services.generation_service import generate_sentence, pick_random
from tests.utils import add_mapping, count_generated_rows, create_tag, create_template, create_vocabulary

EAT_PATTERN = "{subject}は{object}を食べます。"


def request(tag_id, **kwargs):
    return GenerateSentenceRequest(tag_id=tag_id, **kwargs)


@pytest.fixture()
def eat_setup(db_session):
    tag = create_tag(db_session, "Food")
    template = create_template(
        db_session, EAT_PATTERN, slots=[("subject", "pronoun"), ("object", "noun")], tags=[tag]
    )
    watashi = create_vocabulary(
        db_session, kanji="私", furigana="わたし", romaji="watashi", meaning="I",
        part_of_speech="pronoun", topic="people", politeness_level="Polite",
        jlpt_level="N5", difficulty="Beginner",
    )
    sushi = create_vocabulary(
        db_session, kanji="寿司", furigana="すし", romaji="sushi", meaning="sushi",
        part_of_speech="noun", topic="food", jlpt_level="N4", difficulty="Intermediate",
    )
    return tag, template, watashi, sushi


def test_generates_example_sentence(db_session, eat_setup, first_choice):
    tag, template, watashi, sushi = eat_setup

    result = generate_sentence(db_session, request(tag.id), rng=first_choice)

    assert result.japanese_sentence == "わたしはすしを食べます。"
    assert result.english_sentence is None
    assert result.template_id == template.id
    assert result.tag_id == tag.id
    assert [t.slot_name for t in result.tokens] == ["subject", "object"]
    assert [t.vocabulary_id for t in result.tokens] == [watashi.id, sushi.id]
    assert result.tokens[0].display == "わたし"
    assert result.tokens[1].kanji == "寿司"
    assert result.difficulty == "Intermediate"
    assert result.jlpt_level == "N4"
    assert result.politeness_level == "Polite"


def test_persists_sentence_and_one_binding_per_slot(db_session, eat_setup, first_choice):
    tag, template, watashi, sushi = eat_setup

    result = generate_sentence(db_session, request(tag.id), rng=first_choice)

    stored = db_session.get(GeneratedSentence, result.id)
    assert stored.japanese_sentence == result.japanese_sentence
    assert stored.is_favorite is False
    assert stored.source_tag_id == tag.id
    bindings = db_session.exec(
        select(GeneratedSentenceVocabulary).where(GeneratedSentenceVocabulary.generated_sentence_id == result.id)
    ).all()
    assert sorted((b.slot_name, b.vocabulary_id) for b in bindings) == [
        ("object", sushi.id),
        ("subject", watashi.id),
    ]


def test_display_field_controls_rendering(db_session, eat_setup, first_choice):
    tag, _, _, _ = eat_setup

    result = generate_sentence(db_session, request(tag.id, display_field="romaji"), rng=first_choice)
    assert result.japanese_sentence == "watashiはsushiを食べます。"

    result = generate_sentence(db_session, request(tag.id, display_field="kanji"), rng=first_choice)
    assert result.japanese_sentence == "私は寿司を食べます。"


def test_no_placeholder_left(db_session, eat_setup, first_choice):
    tag, _, _, _ = eat_setup
    result = generate_sentence(db_session, request(tag.id), rng=first_choice)
    assert "{" not in result.japanese_sentence
    assert "}" not in result.japanese_sentence


def test_constraints_filter_candidates(db_session, eat_setup, first_choice):
    tag, _, _, sushi = eat_setup
    tempura = create_vocabulary(
        db_session, furigana="てんぷら", part_of_speech="noun", topic="food", difficulty="Beginner"
    )
    create_vocabulary(db_session, furigana="ぼく", part_of_speech="pronoun", difficulty="Beginner")

    result = generate_sentence(db_session, request(tag.id, difficulty="Beginner"), rng=first_choice)
    assert result.tokens[1].vocabulary_id == tempura.id
    assert result.difficulty == "Beginner"


def test_blank_constraints_mean_no_restriction(db_session, eat_setup, first_choice):
    tag, _, _, _ = eat_setup
    result = generate_sentence(
        db_session,
        GenerateSentenceRequest.model_validate(
            {"tagId": tag.id, "difficulty": "", "jlptLevel": "  ", "politenessLevel": None}
        ),
        rng=first_choice,
    )
    assert result.japanese_sentence == "わたしはすしを食べます。"


def test_tag_mappings_restrict_vocabulary(db_session, eat_setup, first_choice):
    tag, _, watashi, sushi = eat_setup
    create_vocabulary(db_session, furigana="しんぶん", part_of_speech="noun", topic="media")
    add_mapping(db_session, tag, "food")
    add_mapping(db_session, tag, "people")

    result = generate_sentence(db_session, request(tag.id), rng=first_choice)
    assert [t.vocabulary_id for t in result.tokens] == [watashi.id, sushi.id]


def test_tag_without_mapping_accepts_any_topic(db_session, eat_setup, last_choice):
    tag, _, _, _ = eat_setup
    newspaper = create_vocabulary(
        db_session, furigana="しんぶん", part_of_speech="noun", topic="media", subtopic="print"
    )

    result = generate_sentence(db_session, request(tag.id), rng=last_choice)
    assert result.tokens[1].vocabulary_id == newspaper.id


def test_unsatisfiable_slot_persists_nothing(db_session, eat_setup, first_choice):
    tag, _, _, _ = eat_setup
    add_mapping(db_session, tag, "people")  # no noun in topic "people"

    with pytest.raises(UnsatisfiableSlotError) as exc:
        generate_sentence(db_session, request(tag.id), rng=first_choice)

    assert exc.value.slot_name == "object"
    assert "object" in str(exc.value)
    assert count_generated_rows(db_session) == (0, 0)


def test_constraint_failure_on_first_slot(db_session, eat_setup, first_choice):
    tag, _, _, _ = eat_setup
    with pytest.raises(UnsatisfiableSlotError) as exc:
        generate_sentence(db_session, request(tag.id, jlpt_level="N1"), rng=first_choice)
    assert exc.value.slot_name == "subject"
    assert count_generated_rows(db_session) == (0, 0)


def test_slot_without_part_of_speech_is_unsatisfiable(db_session, first_choice):
    tag = create_tag(db_session)
    create_template(db_session, "{x}", slots=[("x", None)], tags=[tag])
    create_vocabulary(db_session, furigana="なにか", part_of_speech=None)

    with pytest.raises(UnsatisfiableSlotError):
        generate_sentence(db_session, request(tag.id), rng=first_choice)


def test_same_word_may_fill_several_slots(db_session, first_choice):
    tag = create_tag(db_session)
    create_template(db_session, "{a}と{b}", slots=[("a", "noun"), ("b", "noun")], tags=[tag])
    cat = create_vocabulary(db_session, furigana="ねこ", part_of_speech="noun")

    result = generate_sentence(db_session, request(tag.id), rng=first_choice)
    assert result.japanese_sentence == "ねことねこ"
    assert [t.vocabulary_id for t in result.tokens] == [cat.id, cat.id]
    assert count_generated_rows(db_session) == (1, 2)


def test_repeated_placeholder_rendered_identically(db_session, first_choice):
    tag = create_tag(db_session)
    create_template(db_session, "{a}、{a}!", slots=[("a", "noun")], tags=[tag])
    create_vocabulary(db_session, furigana="はい", part_of_speech="noun")

    result = generate_sentence(db_session, request(tag.id), rng=first_choice)
    assert result.japanese_sentence == "はい、はい!"


def test_explicit_template_for_tag(db_session, eat_setup, first_choice):
    tag, _, _, _ = eat_setup
    other = create_template(db_session, "{object}です。", slots=[("object", "noun")])

    result = generate_sentence(db_session, request(tag.id, template_id=other.id), rng=first_choice)
    assert result.template_id == other.id
    assert result.japanese_sentence == "すしです。"


def test_unknown_tag(db_session):
    with pytest.raises(NotFoundError):
        generate_sentence(db_session, request(4242))


def test_tag_without_templates_persists_nothing(db_session):
    tag = create_tag(db_session)
    with pytest.raises(NoActiveTemplatesError):
        generate_sentence(db_session, request(tag.id))
    assert count_generated_rows(db_session) == (0, 0)


def test_store_failure_rolls_back(db_session, eat_setup, first_choice, monkeypatch):
    tag, _, _, _ = eat_setup

    def failing_commit():
        raise OperationalError("INSERT", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "commit", failing_commit)
    with pytest.raises(PersistenceError):
        generate_sentence(db_session, request(tag.id), rng=first_choice)
    monkeypatch.undo()

    assert count_generated_rows(db_session) == (0, 0)


def test_pick_random():
    assert pick_random([]) is None
    assert pick_random(["only"]) == "only"
