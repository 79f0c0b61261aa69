"""
PGN batch splitting and parsing.

Splitting works on raw text so that each record keeps the exact text
its digest is computed from. Parsing is delegated to python-chess.
"""

from __future__ import annotations

import io
import logging
import re
from typing import List, Optional

import chess.pgn

from pgn_book.core.errors import ParseError
from pgn_book.core.positions import board_key
from pgn_book.core.types import ParsedGame, Ply

logger = logging.getLogger(__name__)

# A run of blank lines (any line ending, whitespace-only lines allowed)
# followed by a tag pair line starts a new game.
_GAME_BOUNDARY = re.compile(r"(?:[ \t]*\r?\n){2,}(?=[ \t]*\[)")


def split_batch(batch: str, separator: Optional[str] = None) -> List[str]:
    """
    Split concatenated game records into individual records.

    Args:
        batch: Raw text with one or more PGN games
        separator: Exact record delimiter. If None, games are split at
            blank-line runs followed by a tag pair.

    Returns:
        Records with surrounding whitespace stripped; empty fragments
        (e.g. the trailing one after the final delimiter) are dropped.
    """
    if separator:
        fragments = batch.split(separator)
    else:
        fragments = _GAME_BOUNDARY.split(batch)

    return [f.strip() for f in fragments if f.strip()]


def parse_game(raw_text: str) -> ParsedGame:
    """
    Parse one game record into headers and mainline plies.

    The board is built from the record's own ``Variant``/``FEN``
    headers, so variant games replay under their own rules.

    Raises:
        ParseError: if no game is found or the move text is illegal
    """
    handle = io.StringIO(raw_text)
    try:
        game = chess.pgn.read_game(handle)
        trailing = chess.pgn.read_game(handle) if game is not None else None
    except ValueError as e:
        raise ParseError(f"Could not read game: {e}") from e

    if game is None:
        raise ParseError("No game found in record")
    if game.errors:
        raise ParseError(f"Invalid game record: {game.errors[0]}") from game.errors[0]
    if trailing is not None:
        # Only the first game of a record is ingested.
        logger.warning(
            "Record holds more than one game; ignoring movetext after the first (%s)",
            game.headers.get("Event", "?"),
        )

    try:
        board = game.board()
        plies = []
        for move in game.mainline_moves():
            plies.append(Ply(board.san(move), board.uci(move), board_key(board)))
            board.push(move)
    except ValueError as e:
        raise ParseError(f"Could not replay game: {e}") from e

    logger.debug("Parsed game with %d plies", len(plies))
    return ParsedGame(headers=dict(game.headers), plies=plies)
