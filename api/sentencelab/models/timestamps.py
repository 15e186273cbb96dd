"""
Timestamp column helpers.
"""
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def timestamp_field():
    """Field defaulting to utc_now, stored in a timezone-aware DateTime column."""
    return Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
