"""
Exception hierarchy for the opening book.
"""


class BookError(Exception):
    """Base class for all opening book errors."""
    pass


class ParseError(BookError):
    """A game record could not be parsed into plies."""
    pass


class StoreError(BookError):
    """The backing store failed to read or write."""
    pass


class RecordDecodeError(StoreError):
    """A stored row could not be decoded into its structured form."""
    pass


class ConfigError(BookError, ValueError):
    """Invalid configuration (fatal at start-up)."""
    pass
