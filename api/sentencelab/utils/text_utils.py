"""
Text utility functions for rendering generated sentences.
"""
import re
from typing import Mapping, Optional, Union

from sentencelab.models.enums import DisplayField

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")

# Fallback order after the requested field
_FALLBACK_ORDER = (
    DisplayField.FURIGANA,
    DisplayField.KANJI,
    DisplayField.ROMAJI,
    DisplayField.MEANING,
)


def display_chain(display_field: Union[DisplayField, str]) -> list[DisplayField]:
    """
    Return the ordered list of fields tried when rendering a word.

    The requested field comes first, followed by furigana, kanji, romaji and
    meaning with the requested one skipped.

    Args:
        display_field: Requested display field

    Returns:
        List of four DisplayField values
    """
    requested = DisplayField(display_field)
    return [requested] + [field for field in _FALLBACK_ORDER if field != requested]


def display_text(vocabulary, display_field: Union[DisplayField, str] = DisplayField.FURIGANA) -> str:
    """
    Render a vocabulary entry in the requested display field.

    Args:
        vocabulary: Object with kanji, furigana, romaji and meaning attributes
        display_field: Requested display field

    Returns:
        First non-empty value along the fallback chain, or "" when every form is empty
    """
    for field in display_chain(display_field):
        value: Optional[str] = getattr(vocabulary, field.value, None)
        if value:
            return value
    return ""


def placeholder_names(pattern: str) -> list[str]:
    """Return placeholder names in order of appearance (duplicates kept)."""
    return PLACEHOLDER_PATTERN.findall(pattern or "")


def render_pattern(pattern: str, values: Mapping[str, str]) -> str:
    """
    Substitute {name} placeholders in a single pass over the pattern.

    Placeholder names are matched exactly against values, so a slot named
    "obj" never touches "{object}". Every occurrence of a name gets the same
    value. Placeholders without a value are left as they are.

    Args:
        pattern: Template pattern, e.g. "{subject}は{object}を食べます。"
        values: Slot name -> display string

    Returns:
        The rendered sentence
    """
    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        if name in values:
            return values[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_substitute, pattern)
