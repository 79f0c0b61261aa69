"""
Storage module - SQLite persistence for game records and move aggregates.

Use `open_database()` or instantiate BookDatabase directly, then wrap it
in the two stores.
"""

from __future__ import annotations

from pathlib import Path

from pgn_book.storage.database import BookDatabase, MEMORY
from pgn_book.storage.game_records import GameRecordStore
from pgn_book.storage.move_aggregates import MoveAggregateStore


def database_path(store_uri: str | Path, database_name: str) -> str | Path:
    """Resolve the database file for a store location and database name."""
    if str(store_uri) == MEMORY:
        return MEMORY
    return Path(store_uri) / f"{database_name}.db"


def open_database(
    store_uri: str | Path = "data/book",
    database_name: str = "book",
    **kwargs
) -> BookDatabase:
    """
    Open (creating if needed) a book database.

    Args:
        store_uri: Directory for database files, or ":memory:"
        database_name: Database file stem
        **kwargs: Additional arguments (e.g., read_only=True)
    """
    return BookDatabase(database_path(store_uri, database_name), **kwargs)


__all__ = [
    "BookDatabase",
    "GameRecordStore",
    "MoveAggregateStore",
    "database_path",
    "open_database",
]
