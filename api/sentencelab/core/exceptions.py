"""
Custom exceptions for the application.
"""
from typing import Optional


class SentenceLabException(Exception):
    """Base exception for all SentenceLab application exceptions."""
    pass


class ValidationError(SentenceLabException):
    """Raised when validation fails."""
    pass


class NotFoundError(SentenceLabException):
    """Raised when a requested resource is not found."""
    pass


class PersistenceError(SentenceLabException):
    """Raised when the store rejects or fails a write."""
    pass


class NoActiveTemplatesError(ValidationError):
    """Raised when a tag has no active template linked to it."""

    def __init__(self, message: str = "No active templates linked to this tag"):
        super().__init__(message)


class TemplateHasNoSlotsError(ValidationError):
    """Raised when the resolved template defines no slots."""

    def __init__(self, message: str = "Template has no slots defined"):
        super().__init__(message)


class UnsatisfiableSlotError(ValidationError):
    """Raised when no vocabulary entry can fill a slot under the current constraints."""

    def __init__(self, slot_name: Optional[str], message: Optional[str] = None):
        self.slot_name = slot_name
        super().__init__(message or f'No vocabulary candidates found for slot "{slot_name}"')
