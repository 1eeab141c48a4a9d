"""
Base document classes and mixins for Beanie ODM.

This module provides:
- TimestampMixin: created_at/updated_at fields (repositories bump updated_at on writes)
- BaseDocument: Base class combining Document with common functionality
"""

from datetime import datetime, timezone

from beanie import Document
from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin(BaseModel):
    """Mixin that adds created_at and updated_at fields."""

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class BaseDocument(TimestampMixin, Document):
    """
    Base document class for all Flipball documents.

    Provides:
    - Automatic timestamps (created_at, updated_at)
    - Common configuration settings
    """

    class Settings:
        use_state_management = True
