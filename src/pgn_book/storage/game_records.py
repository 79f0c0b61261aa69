"""
Game record store: one row per distinct game, keyed by content digest.

The ``processed_depth`` watermark records how many plies of the game
have already been scored into the move store. It never moves
backwards: plain upserts keep the larger value, and conditional
upserts only apply if nobody advanced the watermark in between.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from pgn_book.core.errors import RecordDecodeError
from pgn_book.core.types import GameRecord
from pgn_book.storage.database import BookDatabase

logger = logging.getLogger(__name__)


def _decode(row: Tuple) -> GameRecord:
    digest, pgn, depth = row
    if not isinstance(digest, str) or not isinstance(pgn, str):
        raise RecordDecodeError(f"Malformed game row: {row!r}")
    if not isinstance(depth, int) or depth < 0:
        raise RecordDecodeError(f"Invalid processed_depth {depth!r} for game {digest}")
    return GameRecord(digest=digest, raw_text=pgn, processed_depth=depth)


class GameRecordStore:
    """Persistence for GameRecord rows."""

    def __init__(self, db: BookDatabase):
        self.db = db

    def find(self, digest: str) -> Optional[GameRecord]:
        """Look up a game by digest. None means it was never seen."""
        rows = self.db.query(
            "SELECT digest, pgn, processed_depth FROM games WHERE digest=?",
            (digest,)
        )
        return _decode(rows[0]) if rows else None

    def upsert(self, record: GameRecord, expected_depth: Optional[int] = None) -> bool:
        """
        Insert or update a game record.

        Args:
            record: Record to write
            expected_depth: If given, the watermark is only advanced when
                the stored value still equals this (compare-and-set).

        Returns:
            True if the write applied. Always True without expected_depth.
        """
        if expected_depth is None:
            self.db.write(
                """INSERT INTO games (digest, pgn, processed_depth) VALUES (?,?,?)
                ON CONFLICT(digest) DO UPDATE SET
                    pgn = excluded.pgn,
                    processed_depth = MAX(games.processed_depth, excluded.processed_depth)""",
                (record.digest, record.raw_text, record.processed_depth),
            )
            return True

        if record.processed_depth < expected_depth:
            raise ValueError(
                f"Watermark would regress from {expected_depth} to {record.processed_depth}"
            )

        applied = self.db.write(
            """INSERT INTO games (digest, pgn, processed_depth) VALUES (?,?,?)
            ON CONFLICT(digest) DO UPDATE SET
                processed_depth = excluded.processed_depth
            WHERE games.processed_depth = ?""",
            (record.digest, record.raw_text, record.processed_depth, expected_depth),
        )
        if not applied:
            logger.warning(
                "Watermark for %s changed concurrently (expected %d)",
                record.digest, expected_depth,
            )
        return applied > 0

    def count(self) -> int:
        return self.db.query("SELECT COUNT(*) FROM games")[0][0]

    def drop_all(self) -> None:
        """Administrative bulk clear of all game records."""
        self.db.write("DELETE FROM games")
        logger.warning("Dropped all game records")
