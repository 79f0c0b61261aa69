"""
Move aggregate store: one row per scored move occurrence.

Rows are appended as games are ingested and summed per move at read
time. An empty result always means no data; read failures raise.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from pgn_book.core.errors import RecordDecodeError
from pgn_book.core.types import BookEntry, MoveAggregate, OUTCOME_WEIGHTS
from pgn_book.storage.database import BookDatabase

logger = logging.getLogger(__name__)

_GROUPED = """
SELECT uci, MIN(san), COUNT(*), SUM(result_wrt), MIN(result_wrt), MAX(result_wrt)
FROM moves
WHERE variant=? AND epd=?
GROUP BY uci
"""


def _decode(row: Tuple) -> BookEntry:
    uci, san, plays, weight, lo, hi = row
    if not isinstance(uci, str) or not isinstance(weight, int):
        raise RecordDecodeError(f"Malformed move row: {row!r}")
    if lo not in OUTCOME_WEIGHTS or hi not in OUTCOME_WEIGHTS:
        raise RecordDecodeError(f"Outcome weight out of range for move {uci}: {lo}..{hi}")
    return BookEntry(uci=uci, san=san or uci, plays=plays, weight=weight)


class MoveAggregateStore:
    """Persistence for MoveAggregate rows."""

    def __init__(self, db: BookDatabase):
        self.db = db

    def append(self, aggregate: MoveAggregate) -> None:
        """Insert one occurrence row. Committed when this returns."""
        self.db.write(
            "INSERT INTO moves (variant, epd, san, uci, result_wrt, sha) VALUES (?,?,?,?,?,?)",
            (
                aggregate.variant,
                aggregate.position,
                aggregate.move_san,
                aggregate.move_uci,
                aggregate.outcome_weight,
                aggregate.source_digest,
            ),
        )

    def entries(self, variant: str, position: str) -> List[BookEntry]:
        """All known moves from a position, best weight first."""
        rows = self.db.query(_GROUPED, (variant, position))
        entries = [_decode(row) for row in rows]
        entries.sort(key=lambda e: (e.weight, e.plays), reverse=True)
        return entries

    def sum_by_move(self, variant: str, position: str) -> Dict[str, int]:
        """Summed outcome weight per move (uci) from a position."""
        return {e.uci: e.weight for e in self.entries(variant, position)}

    def count(self) -> int:
        return self.db.query("SELECT COUNT(*) FROM moves")[0][0]

    def drop_all(self) -> None:
        """Administrative bulk clear of all move rows."""
        self.db.write("DELETE FROM moves")
        logger.warning("Dropped all move aggregates")
