"""
Shared test fixtures for pgn_book tests.

Design principles:
- Real SQLite databases in temporary files
- Real python-chess parsing of small, hand-checked games
- Minimal, focused fixtures
"""

import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from pgn_book.ingest.engine import IngestionEngine
from pgn_book.storage.database import BookDatabase
from pgn_book.storage.game_records import GameRecordStore
from pgn_book.storage.move_aggregates import MoveAggregateStore
from pgn_book.utils.config import Config


# =============================================================================
# Games
# =============================================================================

# 10 plies, white wins
RUY_LOPEZ = """[Event "Casual Game"]
[Site "?"]
[Date "2024.01.01"]
[Round "1"]
[White "Alice"]
[Black "Bob"]
[Result "1-0"]

1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 4. Ba4 Nf6 5. O-O Be7 1-0"""

# 4 plies, draw
QUEENS_GAMBIT_DRAW = """[Event "Casual Game"]
[White "Carol"]
[Black "Dave"]
[Result "1/2-1/2"]

1. d4 d5 2. c4 e6 1/2-1/2"""

# 4 plies, black wins
FOOLS_MATE = """[Event "Casual Game"]
[White "Erin"]
[Black "Frank"]
[Result "0-1"]

1. f3 e5 2. g4 Qh4# 0-1"""

# 4 plies, unfinished, King of the Hill
KOTH_GAME = """[Event "Rated King of the Hill game"]
[Variant "King of the Hill"]
[Result "*"]

1. e4 e5 2. Nf3 Nc6 *"""

ILLEGAL_GAME = """[Event "Broken"]
[Result "1-0"]

1. e4 e5 2. Qxf7 1-0"""

START_EPD = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -"
AFTER_E4_EPD = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq -"


@pytest.fixture
def games_pgn() -> dict:
    """Sample games by name."""
    return {
        "ruy_lopez": RUY_LOPEZ,
        "draw": QUEENS_GAMBIT_DRAW,
        "fools_mate": FOOLS_MATE,
        "koth": KOTH_GAME,
        "illegal": ILLEGAL_GAME,
    }


@pytest.fixture
def start_epd() -> str:
    return START_EPD


@pytest.fixture
def after_e4_epd() -> str:
    return AFTER_E4_EPD


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def temp_db_path() -> Generator[Path, None, None]:
    """Temporary database file with cleanup."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = Path(f.name)
    yield path
    for suffix in ["", "-wal", "-shm"]:
        p = Path(str(path) + suffix)
        if p.exists():
            p.unlink()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Temporary directory with cleanup."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep BOOK_* variables from the host out of every test."""
    for key in ("BOOK_STORE_URI", "BOOK_DATABASE", "BOOK_DEPTH", "BOOK_RECORD_SEPARATOR"):
        monkeypatch.delenv(key, raising=False)


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def database(temp_db_path) -> Generator[BookDatabase, None, None]:
    db = BookDatabase(temp_db_path)
    yield db
    db.close()


@pytest.fixture
def game_store(database) -> GameRecordStore:
    return GameRecordStore(database)


@pytest.fixture
def move_store(database) -> MoveAggregateStore:
    return MoveAggregateStore(database)


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def make_engine(game_store, move_store) -> Callable[..., IngestionEngine]:
    """Factory for engines sharing the same stores."""
    def factory(max_depth: int = 40, record_separator=None, **kwargs) -> IngestionEngine:
        config = Config(
            store_uri=":memory:",
            max_depth=max_depth,
            record_separator=record_separator,
        )
        return IngestionEngine(config, game_store, move_store, **kwargs)
    return factory


@pytest.fixture
def engine(make_engine) -> IngestionEngine:
    return make_engine()
