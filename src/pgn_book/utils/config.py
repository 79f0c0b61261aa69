"""
Configuration for the opening book.
"""

from __future__ import annotations

import codecs
import logging
import os
from typing import Mapping, Optional

from pgn_book.core.errors import ConfigError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_STORE_URI = "data/book"
DEFAULT_DATABASE_NAME = "book"
DEFAULT_MAX_DEPTH = 40  # plies

ENV_STORE_URI = "BOOK_STORE_URI"
ENV_DATABASE_NAME = "BOOK_DATABASE"
ENV_MAX_DEPTH = "BOOK_DEPTH"
ENV_RECORD_SEPARATOR = "BOOK_RECORD_SEPARATOR"


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    """Integer environment value; unparsable values fall back to the default."""
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %d", key, raw, default)
        return default


def decode_separator(raw: Optional[str]) -> Optional[str]:
    """Record separator with backslash escapes (e.g. "\\n\\n\\n") expanded."""
    if not raw:
        return None
    return codecs.decode(raw, "unicode_escape")


class Config:
    """
    Opening book configuration with sensible defaults.

    Args:
        store_uri: Directory holding database files, or ":memory:"
            (default: data/book)
        database_name: Database file stem inside store_uri (default: book)
        max_depth: Maximum number of plies per game scored into the book
            (default: 40)
        record_separator: Exact delimiter between games in a batch. None
            splits at blank lines followed by a PGN tag pair.
    """

    def __init__(
        self,
        store_uri: str = DEFAULT_STORE_URI,
        database_name: str = DEFAULT_DATABASE_NAME,
        max_depth: int = DEFAULT_MAX_DEPTH,
        record_separator: Optional[str] = None,
    ):
        if not store_uri:
            raise ConfigError("store_uri must not be empty")
        if not database_name:
            raise ConfigError("database_name must not be empty")
        if max_depth < 0:
            raise ConfigError(f"max_depth must be >= 0, got {max_depth}")

        self.store_uri = store_uri
        self.database_name = database_name
        self.max_depth = max_depth
        self.record_separator = record_separator or None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> "Config":
        """
        Build a configuration from environment variables.

        Reads BOOK_STORE_URI, BOOK_DATABASE, BOOK_DEPTH and
        BOOK_RECORD_SEPARATOR; keyword overrides that are not None win.
        """
        env = os.environ if env is None else env
        values = {
            "store_uri": env.get(ENV_STORE_URI) or DEFAULT_STORE_URI,
            "database_name": env.get(ENV_DATABASE_NAME) or DEFAULT_DATABASE_NAME,
            "max_depth": _env_int(env, ENV_MAX_DEPTH, DEFAULT_MAX_DEPTH),
            "record_separator": decode_separator(env.get(ENV_RECORD_SEPARATOR)),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def __repr__(self) -> str:
        return (
            f"Config(store_uri={self.store_uri!r}, database_name={self.database_name!r}, "
            f"max_depth={self.max_depth}, record_separator={self.record_separator!r})"
        )
