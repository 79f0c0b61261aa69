"""
Parsing module - splits PGN batches and replays games into plies.
"""

from pgn_book.parsing.pgn import split_batch, parse_game

__all__ = [
    "split_batch",
    "parse_game",
]
