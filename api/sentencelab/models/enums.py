"""
Model enums.
"""
from enum import Enum


class DifficultyLevel(str, Enum):
    """Difficulty tiers, ordered from easiest to hardest."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @property
    def rank(self) -> int:
        return list(DifficultyLevel).index(self) + 1


class JLPTLevel(str, Enum):
    """JLPT proficiency levels, N5 lowest to N1 highest."""
    N5 = "N5"
    N4 = "N4"
    N3 = "N3"
    N2 = "N2"
    N1 = "N1"

    @property
    def rank(self) -> int:
        return list(JLPTLevel).index(self) + 1


class DisplayField(str, Enum):
    """Vocabulary surface form used when rendering a sentence."""
    KANJI = "kanji"
    FURIGANA = "furigana"
    ROMAJI = "romaji"
    MEANING = "meaning"


class TaggingTargetType(str, Enum):
    """Kinds of records a tagging row can point at."""
    TEMPLATE = "template"


# Aggregated politeness when chosen words disagree
MIXED_POLITENESS = "Mixed"
