"""
Script to populate tags, vocabulary and sentence templates from a JSON file.

Usage:
    python populate_sample_data.py [path/to/data.json]

The file has three lists: "tags", "vocabulary" and "templates" (see
sample_data.json). Tags may name a parent defined earlier in the list and
templates list the names of the tags they are eligible for.
"""
import sys
import json
import logging
from pathlib import Path
from typing import Dict, List
from pydantic import BaseModel, Field
from sqlmodel import Session, SQLModel

from sentencelab.models import (
    Tag,
    Tagging,
    TaggingTargetType,
    TagVocabMapping,
    SentenceTemplate,
    TemplateSlot,
    Vocabulary,
)
from sentencelab.schemas.tag import TagImport
from sentencelab.schemas.template import SentenceTemplateImport
from sentencelab.schemas.vocabulary import VocabularyImport
from sentencelab.utils.text_utils import placeholder_names

logger = logging.getLogger(__name__)


class SampleData(BaseModel):
    """Validated content of a data file."""
    tags: List[TagImport] = Field(default_factory=list)
    vocabulary: List[VocabularyImport] = Field(default_factory=list)
    templates: List[SentenceTemplateImport] = Field(default_factory=list)


def load_sample_data(data_file_path: Path) -> SampleData:
    """Read and validate a data file."""
    with open(data_file_path, 'r', encoding='utf-8') as f:
        raw = json.load(f)
    return SampleData.model_validate(raw)


def populate(session: Session, data: SampleData) -> Dict[str, int]:
    """
    Insert the content of data in one transaction.

    Returns:
        Dict with the number of tags, vocabulary entries and templates inserted

    Raises:
        ValueError: If a tag parent or template tag name is unknown
    """
    tags_by_name: Dict[str, Tag] = {}
    try:
        for tag_data in data.tags:
            parent_id = None
            if tag_data.parent:
                if tag_data.parent not in tags_by_name:
                    raise ValueError(f"Unknown parent tag '{tag_data.parent}' for tag '{tag_data.name}'")
                parent_id = tags_by_name[tag_data.parent].id

            tag = Tag(
                name=tag_data.name,
                type=tag_data.type,
                parent_tag_id=parent_id,
                description=tag_data.description,
            )
            session.add(tag)
            session.flush()  # Flush to get the tag ID for children
            tags_by_name[tag.name] = tag

            for mapping in tag_data.vocab_mappings:
                session.add(TagVocabMapping(
                    tag_id=tag.id,
                    vocab_topic=mapping.topic,
                    vocab_subtopic=mapping.subtopic,
                ))

        for vocab_data in data.vocabulary:
            session.add(Vocabulary(**vocab_data.model_dump()))

        for template_data in data.templates:
            template = SentenceTemplate(
                template_pattern=template_data.template_pattern,
                description=template_data.description,
                is_active=template_data.is_active,
            )
            session.add(template)
            session.flush()

            placeholders = set(placeholder_names(template.template_pattern))
            for slot_data in template_data.slots:
                if slot_data.slot_name not in placeholders:
                    logger.warning(
                        "Slot '%s' has no placeholder in template '%s'",
                        slot_data.slot_name, template.template_pattern,
                    )
                session.add(TemplateSlot(template_id=template.id, **slot_data.model_dump()))

            for tag_name in template_data.tags:
                if tag_name not in tags_by_name:
                    raise ValueError(f"Unknown tag '{tag_name}' for template '{template_data.template_pattern}'")
                session.add(Tagging(
                    tag_id=tags_by_name[tag_name].id,
                    target_type=TaggingTargetType.TEMPLATE.value,
                    target_id=template.id,
                ))

        session.commit()
    except Exception:
        session.rollback()
        raise

    counts = {
        "tags": len(data.tags),
        "vocabulary": len(data.vocabulary),
        "templates": len(data.templates),
    }
    logger.info("Inserted %(tags)d tags, %(vocabulary)d vocabulary entries, %(templates)d templates", counts)
    return counts


def populate_sample_data(data_file_path: str = None):
    """Create tables if needed and load a data file into the database."""
    from sentencelab.core.database import engine

    # If no path provided, use sample_data.json next to this script
    if data_file_path is None:
        data_file_path = Path(__file__).parent / "sample_data.json"

    try:
        data = load_sample_data(Path(data_file_path))
    except FileNotFoundError:
        logger.error("File not found: %s", data_file_path)
        sys.exit(1)

    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        return populate(session, data)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.info("Starting sample data population...")
    try:
        populate_sample_data(sys.argv[1] if len(sys.argv) > 1 else None)
        logger.info("Successfully completed!")
    except Exception as e:
        logger.error("Error during sample data population: %s", e, exc_info=True)
        sys.exit(1)
