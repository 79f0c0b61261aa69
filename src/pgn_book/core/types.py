"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the book:
- GameRecord: one stored game with its processed-depth watermark
- MoveAggregate: one scored move occurrence
- Ply / ParsedGame: parser output
- BookEntry: aggregated statistics for one move from a position
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple


# ---------------------------------------------------------------------------
# Outcome ordinals
# ---------------------------------------------------------------------------
#
# Game results are scored on a 0..2 scale. Stored weights are always
# relative to the side to move, so higher is better for the mover.

WIN = 2
DRAW = 1
LOSS = 0

OUTCOME_WEIGHTS = (LOSS, DRAW, WIN)

RESULT_ORDINALS = {
    "1-0": WIN,
    "1/2-1/2": DRAW,
    "0-1": LOSS,
}


# ---------------------------------------------------------------------------
# Stored records
# ---------------------------------------------------------------------------

@dataclass
class GameRecord:
    """A distinct game record keyed by content digest."""
    digest: str
    raw_text: str
    processed_depth: int = 0

    def __post_init__(self):
        if self.processed_depth < 0:
            raise ValueError(f"processed_depth must be >= 0, got {self.processed_depth}")

    def __str__(self) -> str:
        return (
            f"pgn = {self.raw_text}\n"
            f"sha256(base64) = {self.digest}\n"
            f"processed depth = {self.processed_depth}"
        )


@dataclass(frozen=True)
class MoveAggregate:
    """
    One move occurrence from a game.

    ``position`` is the EPD before the move, ``move_uci`` is the
    aggregation key and ``outcome_weight`` is the game result seen
    from the side to move at ``position``.
    """
    variant: str
    position: str
    move_san: str
    move_uci: str
    outcome_weight: int
    source_digest: str

    def __post_init__(self):
        if self.outcome_weight not in OUTCOME_WEIGHTS:
            raise ValueError(f"outcome_weight must be one of {OUTCOME_WEIGHTS}, got {self.outcome_weight}")

    def __str__(self) -> str:
        return (
            f"epd = {self.position} san = {self.move_san} "
            f"uci = {self.move_uci} sha = {self.source_digest}"
        )


# ---------------------------------------------------------------------------
# Parser output
# ---------------------------------------------------------------------------

class Ply(NamedTuple):
    """A half-move together with the position it was played from."""
    san: str
    uci: str
    position: str


@dataclass
class ParsedGame:
    headers: Dict[str, str] = field(default_factory=dict)
    plies: List[Ply] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.plies)


# ---------------------------------------------------------------------------
# Query results
# ---------------------------------------------------------------------------

class BookEntry(NamedTuple):
    """Aggregated outcome weight for one move with derived properties."""

    uci: str
    san: str
    plays: int = 0
    weight: int = 0

    @property
    def score(self) -> float:
        """Mean weight normalized to [0, 1]. 0.5 when unplayed."""
        if self.plays == 0:
            return 0.5
        return self.weight / (WIN * self.plays)

    @property
    def percent(self) -> float:
        return 100.0 * self.score
