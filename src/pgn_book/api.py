"""
Public API for building and querying an opening book.

Usage:
    from pgn_book import OpeningBook, Config

    with OpeningBook(Config(store_uri="data/book", max_depth=20)) as book:
        book.ingest(open("games.pgn").read())
        book.get_moves("standard", "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -")
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pgn_book.core.types import BookEntry
from pgn_book.ingest import IngestionEngine, IngestReport
from pgn_book.query import BookQuery
from pgn_book.storage import GameRecordStore, MoveAggregateStore, open_database
from pgn_book.utils.config import Config

logger = logging.getLogger(__name__)


class OpeningBook:
    """
    An opening book backed by one database.

    Parameters
    ----------
    config : Config, optional
        Store location and ingestion depth. Defaults to Config.from_env().
    read_only : bool
        Open an existing database for queries only.
    """

    def __init__(self, config: Optional[Config] = None, read_only: bool = False):
        self.config = config or Config.from_env()
        self.db = open_database(
            self.config.store_uri, self.config.database_name, read_only=read_only
        )
        self.games = GameRecordStore(self.db)
        self.moves = MoveAggregateStore(self.db)
        self.engine = IngestionEngine(self.config, self.games, self.moves)
        self.query = BookQuery(self.moves)

    # -------------------------------------------------------------------------
    # Ingestion
    # -------------------------------------------------------------------------

    def ingest(self, batch: str) -> IngestReport:
        """Ingest a batch of concatenated PGN games."""
        return self.engine.ingest(batch)

    def ingest_file(self, path: str | Path) -> IngestReport:
        """Ingest every game in a PGN file."""
        path = Path(path)
        logger.info("Ingesting %s", path)
        data = path.read_bytes()
        try:
            batch = data.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning("%s is not valid UTF-8 (%s); undecodable bytes replaced", path, e)
            batch = data.decode("utf-8", errors="replace")
        return self.ingest(batch)

    def ingest_files(self, paths: Iterable[str | Path], jobs: int = 1) -> IngestReport:
        """
        Ingest several PGN files, up to ``jobs`` at a time.

        Games shared between files are still processed once per digest
        at a time, so concurrent files never double count.
        """
        paths = list(paths)
        total = IngestReport()

        if jobs <= 1:
            for path in paths:
                total.merge(self.ingest_file(path))
            return total

        with ThreadPoolExecutor(max_workers=jobs) as pool:
            for report in pool.map(self.ingest_file, paths):
                total.merge(report)
        return total

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_moves(self, variant: str, position: str) -> Dict[str, int]:
        """Summed outcome weight per move (uci) from a position."""
        return self.query.get_moves(variant, position)

    def get_entries(self, variant: str, position: str) -> List[BookEntry]:
        """Per-move statistics from a position, best first."""
        return self.query.get_entries(variant, position)

    def get_info(self) -> Dict[str, Any]:
        """Get summary statistics."""
        return {**self.db.get_info(), "max_depth": self.config.max_depth}

    # -------------------------------------------------------------------------
    # Administration / lifecycle
    # -------------------------------------------------------------------------

    def drop_all(self) -> None:
        """Delete all games and moves."""
        self.moves.drop_all()
        self.games.drop_all()

    def close(self) -> None:
        self.db.close()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()

    def __str__(self) -> str:
        return (
            f"OpeningBook\n"
            f"-> store = {self.db.db_path}\n"
            f"-> book depth = {self.config.max_depth}"
        )


__all__ = [
    "OpeningBook",
]
