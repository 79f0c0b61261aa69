"""
Outcome scoring relative to the side to move.

Results are ordinals from white's point of view (2 = white won,
1 = draw or unknown, 0 = black won). Each ply is scored from the
mover's point of view, so 2 always means the game was won by the
side that played the move.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from pgn_book.core.types import DRAW, RESULT_ORDINALS, WIN


def result_ordinal(result: Optional[str]) -> int:
    """Ordinal for a PGN ``Result`` header. Unknown results count as draws."""
    if not result:
        return DRAW
    return RESULT_ORDINALS.get(result.strip(), DRAW)


def outcome_weights(ordinal: int, white_to_move: Sequence[bool]) -> np.ndarray:
    """
    Per-ply weights for a game with the given result ordinal.

    Args:
        ordinal: Result ordinal from white's perspective
        white_to_move: For each ply, whether white is the side to move

    Returns:
        int8 array, ``ordinal`` where white moves and ``2 - ordinal``
        where black moves
    """
    movers = np.asarray(white_to_move, dtype=bool)
    return np.where(movers, ordinal, WIN - ordinal).astype(np.int8)
