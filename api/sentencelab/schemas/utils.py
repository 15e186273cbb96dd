"""
Utility functions for schema validation.
"""
from typing import Optional


def blank_to_none(v: Optional[str]) -> Optional[str]:
    """
    Treat empty or whitespace-only strings as missing.

    Filter values coming from select boxes arrive as "" when nothing is picked;
    those must mean "no restriction", not "equal to the empty string".

    Args:
        v: Raw value (None, blank or a real value)

    Returns:
        The stripped value, or None when blank
    """
    if not isinstance(v, str):
        return v
    v_stripped = v.strip()
    if not v_stripped:
        return None
    return v_stripped
