"""
Core module - fundamental types, digests, variants and positions.

This module provides the building blocks used throughout the opening book.
"""

from pgn_book.core.types import (
    GameRecord,
    MoveAggregate,
    Ply,
    ParsedGame,
    BookEntry,
    WIN,
    DRAW,
    LOSS,
    RESULT_ORDINALS,
)
from pgn_book.core.digest import content_digest
from pgn_book.core.variants import VARIANTS, normalize_variant
from pgn_book.core.positions import board_key, position_key, white_to_move
from pgn_book.core.errors import (
    BookError,
    ParseError,
    StoreError,
    RecordDecodeError,
    ConfigError,
)

__all__ = [
    # Types
    "GameRecord",
    "MoveAggregate",
    "Ply",
    "ParsedGame",
    "BookEntry",
    # Constants
    "WIN",
    "DRAW",
    "LOSS",
    "RESULT_ORDINALS",
    "VARIANTS",
    # Functions
    "content_digest",
    "normalize_variant",
    "board_key",
    "position_key",
    "white_to_move",
    # Errors
    "BookError",
    "ParseError",
    "StoreError",
    "RecordDecodeError",
    "ConfigError",
]
