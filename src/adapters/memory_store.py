"""
In-memory content store.

Stands in for the persistent storage collaborator in development and tests.
Records are copied on the way in and out so callers never share state with
the store.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from src.domain.entities import ContentRecord, ContentType
from src.domain.errors import RecordNotFound


class InMemoryContentStore:
    def __init__(self, records: Iterable[ContentRecord] = ()) -> None:
        self._records: dict[str, ContentRecord] = {}
        self._lock = threading.Lock()
        for record in records:
            self._records[record.id] = record.model_copy(deep=True)

    def load_record(self, content_id: str) -> ContentRecord:
        with self._lock:
            record = self._records.get(content_id)
        if record is None:
            raise RecordNotFound(content_id)
        return record.model_copy(deep=True)

    def save_record(self, record: ContentRecord) -> None:
        with self._lock:
            self._records[record.id] = record.model_copy(deep=True)

    def delete_record(self, content_id: str) -> None:
        with self._lock:
            if content_id not in self._records:
                raise RecordNotFound(content_id)
            del self._records[content_id]

    def load_all(self, content_type: ContentType | None = None) -> list[ContentRecord]:
        with self._lock:
            records = list(self._records.values())
        return [
            r.model_copy(deep=True)
            for r in records
            if content_type is None or r.type == content_type
        ]
