"""
Aggregation of per-word metadata into sentence-level metadata.

Every function takes the full collection of chosen vocabulary entries and is
independent of their order.
"""
from typing import Iterable, Optional, Type, TypeVar

from sentencelab.models.enums import DifficultyLevel, JLPTLevel, MIXED_POLITENESS

RankedLevel = TypeVar("RankedLevel", DifficultyLevel, JLPTLevel)


def _highest_rank(values: Iterable[Optional[str]], levels: Type[RankedLevel]) -> Optional[str]:
    """Return the highest-ranked recognized value, or None if no value is recognized."""
    recognized = []
    for value in values:
        try:
            recognized.append(levels(value))
        except ValueError:
            continue
    if not recognized:
        return None
    return max(recognized, key=lambda level: level.rank).value


def aggregate_difficulty(words: Iterable) -> Optional[str]:
    """Highest difficulty present (Beginner < Intermediate < Advanced)."""
    return _highest_rank((w.difficulty for w in words), DifficultyLevel)


def aggregate_jlpt(words: Iterable) -> Optional[str]:
    """Highest JLPT level present (N5 < N4 < N3 < N2 < N1)."""
    return _highest_rank((w.jlpt_level for w in words), JLPTLevel)


def aggregate_politeness(words: Iterable) -> Optional[str]:
    """
    Sentence politeness from its words.

    Returns:
        None when no word has a politeness value, that value when all words
        agree, "Mixed" when two or more distinct values appear
    """
    distinct = {
        w.politeness_level
        for w in words
        if w.politeness_level and w.politeness_level.strip()
    }
    if not distinct:
        return None
    if len(distinct) == 1:
        return next(iter(distinct))
    return MIXED_POLITENESS
