"""
PGN Book - incremental opening book built from PGN game collections.

Games are deduplicated by content digest and scored ply by ply from
the mover's point of view. A per-game watermark makes ingestion
resumable: re-submitting a game, or raising the depth limit later,
only scores the plies not yet in the book.

Quick Start:
    import chess
    from pgn_book import OpeningBook, Config

    with OpeningBook(Config(max_depth=20)) as book:
        book.ingest_file("games.pgn")
        book.get_moves("standard", chess.STARTING_FEN)

Modules:
    core     - Types, content digest, variant and position helpers, errors
    parsing  - Batch splitting and PGN replay (python-chess)
    storage  - SQLite stores for game records and move aggregates
    ingest   - Incremental ingestion engine and scoring
    query    - Book lookups
"""

from pgn_book.api import OpeningBook
from pgn_book.core import BookEntry, content_digest, normalize_variant
from pgn_book.ingest import IngestionEngine, IngestReport
from pgn_book.query import BookQuery
from pgn_book.utils.config import Config

__version__ = "1.0.0"

__all__ = [
    # Main API
    "OpeningBook",
    "Config",
    "IngestionEngine",
    "IngestReport",
    "BookQuery",
    # Types
    "BookEntry",
    # Functions
    "content_digest",
    "normalize_variant",
]
