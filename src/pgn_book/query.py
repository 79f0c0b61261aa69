"""
Book lookups: which moves are known from a position, and how good are they.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from pgn_book.core.errors import ParseError
from pgn_book.core.positions import position_key
from pgn_book.core.types import BookEntry
from pgn_book.core.variants import normalize_variant
from pgn_book.storage.move_aggregates import MoveAggregateStore


class BookQuery:
    """Read side of the book. Accepts any variant label and FEN or EPD positions."""

    def __init__(self, moves: MoveAggregateStore):
        self.moves = moves

    def get_moves(self, variant: str, position: str) -> Dict[str, int]:
        """
        Summed outcome weight per move (uci) from a position.

        Returns an empty dict for unknown positions. Store failures
        raise StoreError and unreadable positions raise ParseError.
        """
        return self.moves.sum_by_move(*self._key(variant, position))

    def get_entries(self, variant: str, position: str) -> List[BookEntry]:
        """Per-move play counts and weights, best first."""
        return self.moves.entries(*self._key(variant, position))

    @staticmethod
    def _key(variant: str, position: str) -> Tuple[str, str]:
        variant = normalize_variant(variant)
        try:
            return variant, position_key(position, variant)
        except ValueError as e:
            raise ParseError(f"Invalid {variant} position {position!r}: {e}") from e
