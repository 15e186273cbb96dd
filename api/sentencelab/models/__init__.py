"""
Models package - imports all models so they are registered with SQLModel.
"""
# Import enums first
from sentencelab.models.enums import (
    DifficultyLevel,
    JLPTLevel,
    DisplayField,
    TaggingTargetType,
    MIXED_POLITENESS,
)

# Import all models
from sentencelab.models.vocabulary import Vocabulary
from sentencelab.models.tag import Tag
from sentencelab.models.tagging import Tagging
from sentencelab.models.tag_vocab_mapping import TagVocabMapping
from sentencelab.models.sentence_template import SentenceTemplate
from sentencelab.models.template_slot import TemplateSlot
from sentencelab.models.generated_sentence import GeneratedSentence
from sentencelab.models.generated_sentence_vocabulary import GeneratedSentenceVocabulary
from sentencelab.models.practice_history import PracticeHistory

__all__ = [
    'DifficultyLevel',
    'JLPTLevel',
    'DisplayField',
    'TaggingTargetType',
    'MIXED_POLITENESS',
    'Vocabulary',
    'Tag',
    'Tagging',
    'TagVocabMapping',
    'SentenceTemplate',
    'TemplateSlot',
    'GeneratedSentence',
    'GeneratedSentenceVocabulary',
    'PracticeHistory',
]
