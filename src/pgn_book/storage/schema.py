"""
Database schema for the opening book.

Tables:
    games  - One row per distinct game record, keyed by content digest
    moves  - One row per scored move occurrence (summed at read time)

Indexes:
    idx_moves_position - Fast lookup of all moves from (variant, epd)
"""

SCHEMA = """
CREATE TABLE IF NOT EXISTS games (
    digest TEXT PRIMARY KEY,
    pgn TEXT NOT NULL,
    processed_depth INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS moves (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    variant TEXT NOT NULL,
    epd TEXT NOT NULL,
    san TEXT NOT NULL,
    uci TEXT NOT NULL,
    result_wrt INTEGER NOT NULL,
    sha TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_moves_position ON moves(variant, epd);
"""
