"""
Position encoding helpers.

Positions are keyed by the EPD python-chess writes for the variant's
board: piece placement, side to move, castling rights, the en passant
square only when a capture is legal, and any variant fields (pockets,
remaining checks). Every key, stored or looked up, goes through the
same board so FENs from other tools land on the stored rows.
"""

from __future__ import annotations

from typing import Callable, Dict

import chess
import chess.variant

_BOARDS: Dict[str, Callable[[str], chess.Board]] = {
    "antichess": chess.variant.AntichessBoard,
    "atomic": chess.variant.AtomicBoard,
    "chess960": lambda fen: chess.Board(fen, chess960=True),
    "crazyhouse": chess.variant.CrazyhouseBoard,
    "horde": chess.variant.HordeBoard,
    "kingofthehill": chess.variant.KingOfTheHillBoard,
    "racingkings": chess.variant.RacingKingsBoard,
    "threecheck": chess.variant.ThreeCheckBoard,
}


def board_key(board: chess.Board) -> str:
    """Position key of a board."""
    return board.epd()


def position_key(position: str, variant: str = "standard") -> str:
    """
    Normalize a FEN or EPD string to the stored position key.

    Args:
        position: FEN or EPD; move counters are optional
        variant: Canonical variant name, selects the board rules

    Raises:
        ValueError: if the position cannot be read
    """
    make_board = _BOARDS.get(variant, chess.Board)
    return board_key(make_board(position.strip()))


def white_to_move(position: str) -> bool:
    """
    True if the first mover (white) is to move in ``position``.

    Raises:
        ValueError: if the side-to-move field is missing or malformed
    """
    fields = position.split()
    if len(fields) < 2 or fields[1] not in ("w", "b"):
        raise ValueError(f"No side to move in position: {position!r}")
    return fields[1] == "w"
