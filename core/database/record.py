"""
ApplicationRecord: abstract base for every table model of the application.
"""

from datetime import datetime, timezone
from typing import Optional
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ApplicationRecord(SQLModel):
    """Shared columns for table models; subclass with ``table=True``."""

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def touch(self) -> None:
        """Mark the record as modified now."""
        self.updated_at = utcnow()
