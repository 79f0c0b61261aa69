"""
Shared SQLite connection for the opening book.

One long-lived connection serves both stores. Access is serialized
with a re-entrant lock so the connection can be shared by ingestion
threads; every write is committed before the call returns.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from pgn_book.core.errors import ConfigError, StoreError
from pgn_book.storage.schema import SCHEMA

logger = logging.getLogger(__name__)

MEMORY = ":memory:"


class BookDatabase:
    """Connection, schema and lifecycle for a book database file."""

    def __init__(self, db_path: str | Path, read_only: bool = False):
        self.read_only = read_only
        self._closed = False
        self.lock = threading.RLock()

        if str(db_path) == MEMORY:
            self.db_path = MEMORY
            target, uri = MEMORY, False
        else:
            self.db_path = Path(db_path).resolve()
            if read_only:
                target, uri = f"{self.db_path.as_uri()}?mode=ro", True
            else:
                target, uri = str(self.db_path), False

        writable_file = self.db_path != MEMORY and not read_only
        try:
            if writable_file:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self.conn = sqlite3.connect(target, uri=uri, check_same_thread=False)
            if writable_file:
                self.conn.execute("PRAGMA journal_mode=WAL")
            self.conn.execute("PRAGMA synchronous=NORMAL")

            if not read_only:
                self.conn.executescript(SCHEMA)
                self.conn.commit()
        except (sqlite3.Error, OSError) as e:
            raise ConfigError(f"Cannot open book database {self.db_path}: {e}") from e

        logger.info("Book database opened: %s%s", self.db_path, " (read-only)" if read_only else "")

    # -------------------------------------------------------------------------
    # Statements
    # -------------------------------------------------------------------------

    def query(self, sql: str, params: Sequence[Any] = ()) -> List[Tuple]:
        """Run a read statement and return all rows."""
        with self.lock:
            try:
                return self.conn.execute(sql, params).fetchall()
            except sqlite3.Error as e:
                raise StoreError(f"Query failed: {e}") from e

    def write(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Run and commit a write statement. Returns the affected row count."""
        if self.read_only:
            raise StoreError("Cannot write in read-only mode")

        with self.lock:
            try:
                cur = self.conn.execute(sql, params)
                self.conn.commit()
                return cur.rowcount
            except sqlite3.Error as e:
                self.conn.rollback()
                raise StoreError(f"Write failed: {e}") from e

    # -------------------------------------------------------------------------
    # Administration
    # -------------------------------------------------------------------------

    def get_info(self) -> Dict[str, Any]:
        """Get summary statistics."""
        games, depth = self.query(
            "SELECT COUNT(*), COALESCE(SUM(processed_depth), 0) FROM games"
        )[0]
        moves, positions = self.query(
            "SELECT COUNT(*), COUNT(DISTINCT variant || ' ' || epd) FROM moves"
        )[0]
        return {
            "path": str(self.db_path),
            "games": games,
            "processed_plies": depth,
            "moves": moves,
            "positions": positions,
        }

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close the database connection."""
        if self._closed:
            return
        self._closed = True

        with self.lock:
            if self.db_path != MEMORY and not self.read_only:
                try:
                    self.conn.execute("PRAGMA wal_checkpoint(TRUNCATE)")
                except sqlite3.Error as e:
                    logger.warning("WAL checkpoint failed on close: %s", e)
            self.conn.close()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()
