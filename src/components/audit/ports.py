"""
Audit component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from src.domain.entities import ReviewRecord


class AuditTrailRepoPort(Protocol):
    """Append-only storage for review records, keyed by content id."""

    def insert(self, content_id: str, record: ReviewRecord) -> ReviewRecord:
        """Store a record at the head of the content's history."""
        ...

    def list_for(self, content_id: str) -> list[ReviewRecord]:
        """Return the content's history, newest first."""
        ...


class AuditTrailPort(Protocol):
    """What the workflow needs from the audit trail."""

    def append(self, content_id: str, record: ReviewRecord) -> ReviewRecord:
        ...

    def history(self, content_id: str) -> list[ReviewRecord]:
        ...


class TimePort(Protocol):
    """Time provider interface."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...
