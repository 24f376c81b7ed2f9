"""Workflow component port definitions - protocols for dependencies."""

from datetime import datetime
from typing import Protocol

from src.domain.entities import ContentRecord, ContentType


class ContentStorePort(Protocol):
    """
    Storage collaborator for content records.

    Failures raise StorageError; unknown ids raise RecordNotFound.
    """

    def load_record(self, content_id: str) -> ContentRecord:
        """Retrieve a content record by ID."""
        ...

    def save_record(self, record: ContentRecord) -> None:
        """Persist a content record."""
        ...

    def delete_record(self, content_id: str) -> None:
        """Remove a content record."""
        ...

    def load_all(self, content_type: ContentType | None = None) -> list[ContentRecord]:
        """List content records, optionally of one type."""
        ...


class ClockPort(Protocol):
    """Protocol for time operations."""

    def now_utc(self) -> datetime:
        """Return current UTC time."""
        ...
