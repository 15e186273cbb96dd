from sqlalchemy import DateTime
from sqlmodel import SQLModel

from sentencelab.models import GeneratedSentence, PracticeHistory, Tag
from sentencelab.models.timestamps import utc_now
from tests.utils import count_generated_rows, create_tag, create_template


def test_utc_now_is_timezone_aware():
    assert utc_now().utcoffset().total_seconds() == 0


def test_timestamp_columns_are_timezone_aware():
    columns = [
        f"{table.name}.{column.name}"
        for table in SQLModel.metadata.sorted_tables
        for column in table.columns
        if isinstance(column.type, DateTime)
    ]
    assert "generated_sentences.created_at" in columns
    assert "practice_history.practiced_at" in columns
    for table in SQLModel.metadata.sorted_tables:
        for column in table.columns:
            if isinstance(column.type, DateTime):
                assert column.type.timezone, f"{table.name}.{column.name}"


def test_default_timestamps_are_aware():
    assert Tag(name="Food").created_at.tzinfo is not None
    assert GeneratedSentence(template_id=1, japanese_sentence="x").created_at.tzinfo is not None
    assert PracticeHistory(generated_sentence_id=1).practiced_at.tzinfo is not None


def test_rows_with_default_timestamps_insert(db_session):
    tag = create_tag(db_session)
    template = create_template(db_session, "{x}です。", slots=[("x", "noun")], tags=[tag])

    sentence = GeneratedSentence(template_id=template.id, japanese_sentence="ねこです。", source_tag_id=tag.id)
    db_session.add(sentence)
    db_session.commit()
    db_session.add(PracticeHistory(generated_sentence_id=sentence.id, result="correct"))
    db_session.commit()

    assert count_generated_rows(db_session) == (1, 0)
    assert tag.created_at is not None
    assert template.updated_at is not None
