import pytest

from sentencelab.core.exceptions import NotFoundError, ValidationError
from sentencelab.models import GeneratedSentence
from sentencelab.schemas.generation import GenerateSentenceRequest
from sentencelab.services import practice_service, sentence_service
from sentencelab.services.generation_service import generate_sentence
from tests.utils import create_tag, create_template, create_vocabulary


@pytest.fixture()
def sentence(db_session, first_choice):
    tag = create_tag(db_session, "Food")
    create_template(db_session, "{object}をください。", slots=[("object", "noun")], tags=[tag])
    create_vocabulary(db_session, furigana="みず", part_of_speech="noun", politeness_level="Polite", difficulty="Beginner")
    result = generate_sentence(db_session, GenerateSentenceRequest(tag_id=tag.id), rng=first_choice)
    return db_session.get(GeneratedSentence, result.id)


def test_set_favorite_is_idempotent(db_session, sentence):
    sentence_service.set_favorite(db_session, sentence.id, True)
    once = db_session.get(GeneratedSentence, sentence.id).model_dump()

    sentence_service.set_favorite(db_session, sentence.id, True)
    twice = db_session.get(GeneratedSentence, sentence.id).model_dump()

    assert once == twice
    assert twice["is_favorite"] is True

    sentence_service.set_favorite(db_session, sentence.id, False)
    assert db_session.get(GeneratedSentence, sentence.id).is_favorite is False


def test_set_favorite_unknown_sentence(db_session, sentence):
    with pytest.raises(NotFoundError, match="Sentence not found"):
        sentence_service.set_favorite(db_session, 42, True)
    assert db_session.get(GeneratedSentence, sentence.id).is_favorite is False


def test_set_favorite_invalid_id(db_session):
    with pytest.raises(ValidationError, match="Invalid id"):
        sentence_service.set_favorite(db_session, 0, True)


def test_list_generated_sentences(db_session, sentence, first_choice):
    second = generate_sentence(
        db_session, GenerateSentenceRequest(tag_id=sentence.source_tag_id), rng=first_choice
    )
    sentence_service.set_favorite(db_session, sentence.id, True)

    rows, total = sentence_service.list_generated_sentences(db_session)
    assert total == 2
    assert rows[0]["id"] == second.id
    assert rows[0]["tag_name"] == "Food"

    rows, total = sentence_service.list_generated_sentences(db_session, favorite_only=True)
    assert total == 1
    assert rows[0]["id"] == sentence.id
    assert rows[0]["is_favorite"] == 1

    rows, total = sentence_service.list_generated_sentences(db_session, difficulty="Advanced")
    assert (rows, total) == ([], 0)

    rows, total = sentence_service.list_generated_sentences(db_session, politeness_level="Polite", limit=1)
    assert total == 2
    assert len(rows) == 1


def test_record_practice(db_session, sentence):
    entry = practice_service.record_practice(db_session, sentence.id, result="correct", notes="")
    assert entry.id is not None
    assert entry.result == "correct"
    assert entry.notes is None

    history = practice_service.list_practice_history(db_session, sentence.id)
    assert [h.id for h in history] == [entry.id]


def test_record_practice_requires_existing_sentence(db_session):
    with pytest.raises(ValidationError):
        practice_service.record_practice(db_session, None)
    with pytest.raises(NotFoundError):
        practice_service.record_practice(db_session, 999)
