import sqlite3
from datetime import datetime
from typing import Any

from src.domain.entities import ReviewRecord


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteAuditTrailRepo:
    """
    Durable review history. Rows are only ever inserted; insertion order
    (seq) defines newest-first iteration.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._ensure_schema()

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS review_records (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    id TEXT UNIQUE NOT NULL,
                    content_id TEXT NOT NULL,
                    action TEXT NOT NULL,
                    from_status TEXT,
                    to_status TEXT NOT NULL,
                    actor TEXT NOT NULL,
                    comment TEXT,
                    timestamp TEXT NOT NULL
                );
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_review_records_content "
                "ON review_records (content_id, seq)"
            )
            conn.commit()
        finally:
            conn.close()

    def insert(self, content_id: str, record: ReviewRecord) -> ReviewRecord:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO review_records
                (id, content_id, action, from_status, to_status, actor, comment, timestamp)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    record.id,
                    content_id,
                    record.action,
                    record.from_status,
                    record.to_status,
                    record.actor,
                    record.comment,
                    record.timestamp.isoformat(),
                ),
            )
            conn.commit()
            return record
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def list_for(self, content_id: str) -> list[ReviewRecord]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM review_records WHERE content_id = ? ORDER BY seq DESC",
                (content_id,),
            ).fetchall()
            return [self._row_to_record(row) for row in rows]
        finally:
            conn.close()

    def _row_to_record(self, row: dict[str, Any]) -> ReviewRecord:
        return ReviewRecord(
            id=row["id"],
            action=row["action"],
            from_status=row["from_status"],
            to_status=row["to_status"],
            actor=row["actor"],
            comment=row["comment"],
            timestamp=datetime.fromisoformat(row["timestamp"]),
        )
