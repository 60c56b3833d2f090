"""SQLite persistence for crypto codes and computed summaries."""

import sqlite3
import threading
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from ..data.models import AssetCode, Summary
from ..errors import PersistenceError
from ..logging.config import get_logger
from ..utils.time import datetime_to_epoch_ms, epoch_ms_to_datetime
from .base import CodeRepository, SummaryRepository

SCHEMA = """
    CREATE TABLE IF NOT EXISTS codes (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        code VARCHAR(5) NOT NULL UNIQUE
    );
    CREATE TABLE IF NOT EXISTS crypto_datas (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        code VARCHAR(5) NOT NULL,
        start_time INTEGER NOT NULL,
        end_time INTEGER NOT NULL,
        oldest REAL NOT NULL,
        newest REAL NOT NULL,
        min REAL NOT NULL,
        max REAL NOT NULL,
        normalized_range REAL NOT NULL
    );
    CREATE INDEX IF NOT EXISTS idx_crypto_datas_period
        ON crypto_datas(code, start_time, end_time);
    CREATE INDEX IF NOT EXISTS idx_crypto_datas_start ON crypto_datas(start_time);
"""


class SQLiteStore:
    """Shared connection handling and schema bootstrap."""

    def __init__(self, db_path: str = "crypto_recommendations.db"):
        self.db_path = Path(db_path)
        self.logger = get_logger("crypto.store")
        self._lock = threading.Lock()

        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            conn.executescript(SCHEMA)
            conn.commit()

    @contextmanager
    def _get_connection(self):
        """Get database connection, wrapping SQLite failures in PersistenceError."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
            conn.row_factory = sqlite3.Row
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            self.logger.error("Database error", db_path=str(self.db_path), error=str(e))
            raise PersistenceError(f"Database error: {e}", target=str(self.db_path)) from e
        finally:
            if conn:
                conn.close()


class CodeStore(SQLiteStore, CodeRepository):
    """SQLite-backed crypto code storage."""

    def __init__(self, db_path: str = "crypto_recommendations.db",
                 seed_codes: Iterable[str] = ()):
        super().__init__(db_path)
        self._seed(seed_codes)

    def _seed(self, seed_codes: Iterable[str]) -> None:
        """Insert initial codes into an empty codes table."""
        seed_codes = list(seed_codes)
        if not seed_codes:
            return
        with self._lock, self._get_connection() as conn:
            count = conn.execute("SELECT COUNT(*) FROM codes").fetchone()[0]
            if count == 0:
                conn.executemany(
                    "INSERT INTO codes (code) VALUES (?)",
                    [(code.strip().upper(),) for code in seed_codes]
                )
                conn.commit()
                self.logger.info("Seeded crypto codes", codes=seed_codes)

    def exists_by_code(self, code: str) -> bool:
        with self._get_connection() as conn:
            row = conn.execute("SELECT 1 FROM codes WHERE code = ?", (code,)).fetchone()
            return row is not None

    def find_all(self) -> list[AssetCode]:
        with self._get_connection() as conn:
            rows = conn.execute("SELECT id, code FROM codes ORDER BY id").fetchall()
            return [AssetCode(code=row["code"], id=row["id"]) for row in rows]

    def save(self, code: str) -> AssetCode:
        with self._lock, self._get_connection() as conn:
            cursor = conn.execute("INSERT INTO codes (code) VALUES (?)", (code,))
            conn.commit()
            self.logger.info("Crypto code stored", code=code, code_id=cursor.lastrowid)
            return AssetCode(code=code, id=cursor.lastrowid)


class SummaryStore(SQLiteStore, SummaryRepository):
    """SQLite-backed summary storage used for history lookups."""

    def find_exact(self, code: str, start: datetime, end: datetime) -> Optional[Summary]:
        with self._get_connection() as conn:
            return self._find_exact(conn, code, start, end)

    def _find_exact(self, conn: sqlite3.Connection, code: str,
                    start: datetime, end: datetime) -> Optional[Summary]:
        row = conn.execute("""
            SELECT * FROM crypto_datas
            WHERE code = ? AND start_time = ? AND end_time = ?
            ORDER BY id LIMIT 1
        """, (code, datetime_to_epoch_ms(start), datetime_to_epoch_ms(end))).fetchone()
        return self._row_to_summary(row) if row else None

    def upsert(self, summary: Summary) -> Summary:
        with self._lock, self._get_connection() as conn:
            existing = self._find_exact(conn, summary.code, summary.start_time, summary.end_time)

            if existing is not None:
                stored = existing.with_prices(summary)
                conn.execute("""
                    UPDATE crypto_datas SET
                        oldest = ?, newest = ?, min = ?, max = ?, normalized_range = ?
                    WHERE id = ?
                """, (
                    stored.oldest, stored.newest, stored.min_price, stored.max_price,
                    stored.normalized_range, stored.id
                ))
                action = "updated"
            else:
                cursor = conn.execute("""
                    INSERT INTO crypto_datas (
                        code, start_time, end_time, oldest, newest,
                        min, max, normalized_range
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """, (
                    summary.code,
                    datetime_to_epoch_ms(summary.start_time),
                    datetime_to_epoch_ms(summary.end_time),
                    summary.oldest, summary.newest, summary.min_price, summary.max_price,
                    summary.normalized_range
                ))
                stored = replace(summary, id=cursor.lastrowid)
                action = "inserted"

            conn.commit()
            self.logger.debug("Summary stored", code=summary.code, action=action, summary_id=stored.id)
            return stored

    def find_since(self, code: str, since: datetime) -> list[Summary]:
        with self._get_connection() as conn:
            rows = conn.execute("""
                SELECT * FROM crypto_datas
                WHERE code = ? AND start_time > ?
                ORDER BY start_time, id
            """, (code, datetime_to_epoch_ms(since))).fetchall()
            return [self._row_to_summary(row) for row in rows]

    def find_all_since(self, since: datetime) -> dict[str, list[Summary]]:
        with self._get_connection() as conn:
            rows = conn.execute("""
                SELECT * FROM crypto_datas
                WHERE start_time > ?
                ORDER BY code, start_time, id
            """, (datetime_to_epoch_ms(since),)).fetchall()

        grouped: dict[str, list[Summary]] = {}
        for row in rows:
            summary = self._row_to_summary(row)
            grouped.setdefault(summary.code, []).append(summary)
        return grouped

    def _row_to_summary(self, row: sqlite3.Row) -> Summary:
        """Convert database row to Summary object."""
        return Summary(
            code=row["code"],
            start_time=epoch_ms_to_datetime(row["start_time"]),
            end_time=epoch_ms_to_datetime(row["end_time"]),
            oldest=row["oldest"],
            newest=row["newest"],
            min_price=row["min"],
            max_price=row["max"],
            id=row["id"],
        )
