"""
Incremental ingestion of PGN batches into the opening book.

Each game record is identified by its content digest. The stored
``processed_depth`` watermark says how many plies were already scored,
so re-submitting a game only scores the plies beyond the watermark
(up to the configured maximum depth).

Per record:
    1. digest the raw text, read the stored watermark
    2. parse into plies
    3. score plies [watermark, min(total, max_depth)) from the mover's
       point of view and append them to the move store
    4. advance the watermark with a compare-and-set upsert

A crash between 3 and 4 re-appends the affected plies on retry; the
book only needs monotonic coverage, not exactly-once counting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Callable, List

from pgn_book.core.digest import content_digest
from pgn_book.core.errors import ParseError, StoreError
from pgn_book.core.positions import white_to_move
from pgn_book.core.types import GameRecord, MoveAggregate, ParsedGame, Ply
from pgn_book.core.variants import normalize_variant
from pgn_book.ingest.locks import KeyedLock
from pgn_book.ingest.scoring import outcome_weights, result_ordinal
from pgn_book.parsing.pgn import parse_game, split_batch
from pgn_book.storage.game_records import GameRecordStore
from pgn_book.storage.move_aggregates import MoveAggregateStore
from pgn_book.utils.config import Config

logger = logging.getLogger(__name__)

Parser = Callable[[str], ParsedGame]


@dataclass
class IngestReport:
    """Counters for one ingest call."""
    records: int = 0
    ingested: int = 0       # watermark advanced
    skipped: int = 0        # already fully processed
    failed: int = 0         # parse or store failure
    plies_written: int = 0
    plies_failed: int = 0

    def merge(self, other: "IngestReport") -> None:
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))

    def __str__(self) -> str:
        return (
            f"{self.records} records: {self.ingested} ingested, {self.skipped} skipped, "
            f"{self.failed} failed; {self.plies_written} plies written, "
            f"{self.plies_failed} failed"
        )


def _movers(plies: List[Ply]) -> List[bool]:
    try:
        return [white_to_move(p.position) for p in plies]
    except ValueError as e:
        raise ParseError(str(e)) from e


class IngestionEngine:
    """
    Orchestrates dedup, parsing, scoring and persistence of game records.

    Records are processed sequentially within a batch. Concurrent
    ingest calls are safe: work on the same digest is serialized by a
    per-digest lock, and the watermark write is a compare-and-set.
    """

    def __init__(
        self,
        config: Config,
        games: GameRecordStore,
        moves: MoveAggregateStore,
        parser: Parser = parse_game,
    ):
        self.config = config
        self.games = games
        self.moves = moves
        self.parser = parser
        self._locks = KeyedLock()

    def ingest(self, batch: str) -> IngestReport:
        """Ingest every game record in a batch of concatenated PGN text."""
        records = split_batch(batch, self.config.record_separator)
        report = IngestReport()

        for raw_text in records:
            report.merge(self.ingest_record(raw_text))

        logger.info("Ingested batch: %s", report)
        return report

    def ingest_record(self, raw_text: str) -> IngestReport:
        """
        Ingest a single game record.

        Parse and store failures are logged and counted; they never
        propagate, so one bad record cannot block the rest of a batch.
        """
        digest = content_digest(raw_text)
        report = IngestReport(records=1)

        try:
            with self._locks.hold(digest):
                self._process(digest, raw_text, report)
        except ParseError as e:
            logger.warning("Skipping unparseable game %s: %s", digest, e)
            report.failed += 1
        except StoreError as e:
            logger.error("Store error on game %s, watermark not advanced: %s", digest, e)
            report.failed += 1

        return report

    def _process(self, digest: str, raw_text: str, report: IngestReport) -> None:
        existing = self.games.find(digest)
        watermark = existing.processed_depth if existing else 0

        parsed = self.parser(raw_text)
        total_plies = len(parsed.plies)
        max_depth = self.config.max_depth

        if total_plies <= watermark or watermark >= max_depth:
            logger.debug("Game %s already processed (%d/%d plies)", digest, watermark, total_plies)
            report.skipped += 1
            return

        process_to = min(total_plies, max_depth)
        ordinal = result_ordinal(parsed.headers.get("Result"))
        variant = normalize_variant(parsed.headers.get("Variant"))

        plies = parsed.plies[watermark:process_to]
        weights = outcome_weights(ordinal, _movers(plies))

        for ply, weight in zip(plies, weights):
            aggregate = MoveAggregate(
                variant=variant,
                position=ply.position,
                move_san=ply.san,
                move_uci=ply.uci,
                outcome_weight=int(weight),
                source_digest=digest,
            )
            try:
                self.moves.append(aggregate)
                report.plies_written += 1
            except StoreError as e:
                logger.error("Failed to append move (%s): %s", aggregate, e)
                report.plies_failed += 1

        record = GameRecord(digest=digest, raw_text=raw_text, processed_depth=process_to)
        if self.games.upsert(record, expected_depth=watermark):
            logger.debug("Game %s processed %d -> %d plies", digest, watermark, process_to)
            report.ingested += 1
        else:
            report.failed += 1


__all__ = [
    "IngestionEngine",
    "IngestReport",
    "Parser",
]
