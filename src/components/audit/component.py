"""
Audit component - append-only review history per content record.

Invariants:
- Records are immutable once appended; no update or delete is exposed
- history() yields newest first without re-sorting
- History outlives the content record it describes
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime

from src.adapters.clock import SystemClock
from src.domain.entities import ContentStatus, ReviewAction, ReviewRecord

from .ports import AuditTrailRepoPort, TimePort

logger = logging.getLogger(__name__)


class InMemoryAuditTrailRepo:
    """In-memory audit trail repository for testing/dev."""

    def __init__(self) -> None:
        self._records: dict[str, list[ReviewRecord]] = {}
        self._lock = threading.Lock()

    def insert(self, content_id: str, record: ReviewRecord) -> ReviewRecord:
        with self._lock:
            self._records.setdefault(content_id, []).insert(0, record)
        return record

    def list_for(self, content_id: str) -> list[ReviewRecord]:
        with self._lock:
            return list(self._records.get(content_id, []))

    def clear(self) -> None:
        """Clear all entries (for testing)."""
        with self._lock:
            self._records.clear()


class AuditTrailRecorder:
    """
    Pure ledger of workflow transitions keyed by content id.

    Knows nothing about roles or validation; it is passed to the state
    machine as a capability so tests and production can swap the backing
    repository.
    """

    def __init__(
        self,
        repo: AuditTrailRepoPort | None = None,
        time_port: TimePort | None = None,
    ) -> None:
        self._repo = repo if repo is not None else InMemoryAuditTrailRepo()
        self._time = time_port or SystemClock()

    def append(self, content_id: str, record: ReviewRecord) -> ReviewRecord:
        """Insert a record at the head of the content's history."""
        stored = self._repo.insert(content_id, record)
        logger.debug(
            "Audit %s for %s: %s -> %s by %s",
            record.action,
            content_id,
            record.from_status,
            record.to_status,
            record.actor,
        )
        return stored

    def record(
        self,
        content_id: str,
        action: ReviewAction,
        from_status: ContentStatus | None,
        to_status: ContentStatus,
        actor: str,
        comment: str | None = None,
        timestamp: datetime | None = None,
    ) -> ReviewRecord:
        """Build and append a ReviewRecord in one step."""
        entry = ReviewRecord(
            action=action,
            from_status=from_status,
            to_status=to_status,
            actor=actor,
            comment=comment,
            timestamp=timestamp or self._time.now_utc(),
        )
        return self.append(content_id, entry)

    def history(self, content_id: str) -> list[ReviewRecord]:
        """Full history for a content id, newest first; empty if none."""
        return self._repo.list_for(content_id)

    def latest(self, content_id: str) -> ReviewRecord | None:
        entries = self.history(content_id)
        return entries[0] if entries else None
