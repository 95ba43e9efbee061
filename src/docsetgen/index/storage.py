"""SQLite search index store."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from docsetgen.models import IndexRecord


class SearchIndexStore:
    """Persistence layer for the docset ``searchIndex`` table."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self._conn = sqlite3.connect(self.db_path)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA synchronous=FULL;")
        self._ensure_schema()

    def close(self) -> None:
        self._conn.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        try:
            yield self._conn
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise

    def _ensure_schema(self) -> None:
        with self.transaction() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS searchIndex (
                    id INTEGER PRIMARY KEY,
                    name TEXT,
                    type TEXT,
                    path TEXT
                )
                """
            )
            conn.execute(
                "CREATE UNIQUE INDEX IF NOT EXISTS anchor ON searchIndex (name, type, path)"
            )

    def reset(self) -> None:
        """Drop every record by recreating the table and its unique index."""
        with self.transaction() as conn:
            conn.execute("DROP INDEX IF EXISTS anchor")
            conn.execute("DROP TABLE IF EXISTS searchIndex")
        self._ensure_schema()

    def insert(self, record: IndexRecord) -> bool:
        """Insert a record unless an identical one exists.

        Returns:
            True when a row was written, False when the insert was ignored.
        """
        # Note: callers group inserts in a transaction
        cursor = self._conn.execute(
            "INSERT OR IGNORE INTO searchIndex(name, type, path) VALUES (?, ?, ?)",
            (record.name, record.type, record.path),
        )
        return cursor.rowcount == 1

    def records(self) -> List[IndexRecord]:
        rows = self._conn.execute("SELECT name, type, path FROM searchIndex ORDER BY id").fetchall()
        return [IndexRecord(name=row["name"], type=row["type"], path=row["path"]) for row in rows]

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM searchIndex").fetchone()[0]

    def search(self, term: str, *, limit: int = 20) -> List[IndexRecord]:
        """Return records whose name contains ``term``, shortest names first."""
        rows = self._conn.execute(
            """
            SELECT name, type, path FROM searchIndex
            WHERE name LIKE ?
            ORDER BY length(name), name
            LIMIT ?
            """,
            (f"%{term}%", limit),
        ).fetchall()
        return [IndexRecord(name=row["name"], type=row["type"], path=row["path"]) for row in rows]
