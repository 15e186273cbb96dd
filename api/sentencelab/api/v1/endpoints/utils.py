"""
Utility functions for endpoint operations.
"""
import random

from sentencelab.core.exceptions import ValidationError

MAX_PAGE_LIMIT = 500


def validate_pagination(limit: int, offset: int) -> None:
    """
    Validate limit/offset query parameters.

    Raises:
        ValidationError: If limit is outside 1..MAX_PAGE_LIMIT or offset is negative
    """
    if limit < 1 or limit > MAX_PAGE_LIMIT:
        raise ValidationError(f"limit must be between 1 and {MAX_PAGE_LIMIT}")
    if offset < 0:
        raise ValidationError("offset must be >= 0")


def get_random() -> random.Random:
    """Dependency providing the random source used for template and vocabulary choices."""
    return random.Random()
