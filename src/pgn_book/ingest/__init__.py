"""
Ingest module - incremental, resumable scoring of PGN batches.
"""

from pgn_book.ingest.engine import IngestionEngine, IngestReport
from pgn_book.ingest.locks import KeyedLock
from pgn_book.ingest.scoring import outcome_weights, result_ordinal

__all__ = [
    "IngestionEngine",
    "IngestReport",
    "KeyedLock",
    "outcome_weights",
    "result_ordinal",
]
