"""
Command-line interface for building and querying the opening book.
"""

import argparse
import logging
import sys

import chess
from dotenv import load_dotenv

from pgn_book.api import OpeningBook
from pgn_book.core.errors import BookError
from pgn_book.core.variants import VARIANTS
from pgn_book.utils.config import Config, decode_separator


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build an opening book from PGN games"
    )
    parser.add_argument(
        "--store", "-s",
        default=None,
        help="Directory for database files, or :memory: (default: $BOOK_STORE_URI or data/book)",
    )
    parser.add_argument(
        "--database", "-d",
        default=None,
        help="Database name (default: $BOOK_DATABASE or book)",
    )
    noise = parser.add_mutually_exclusive_group()
    noise.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging",
    )
    noise.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    ingest = sub.add_parser("ingest", help="Ingest PGN files")
    ingest.add_argument("files", nargs="+", help="PGN files to ingest")
    ingest.add_argument(
        "--depth", "-t",
        type=int,
        default=None,
        help="Max plies per game (default: $BOOK_DEPTH or 40)",
    )
    ingest.add_argument(
        "--separator",
        default=None,
        help="Exact game delimiter, backslash escapes allowed (default: blank line before a tag pair)",
    )
    ingest.add_argument(
        "--jobs", "-j",
        type=int,
        default=1,
        help="Files ingested concurrently (default: 1)",
    )

    query = sub.add_parser("query", help="List book moves for a position")
    query.add_argument(
        "--variant",
        default="standard",
        help=f"Variant ({', '.join(VARIANTS)}; default: standard)",
    )
    query.add_argument(
        "--fen",
        default=chess.STARTING_FEN,
        help="Position as FEN or EPD (default: starting position)",
    )

    sub.add_parser("info", help="Show database statistics")
    sub.add_parser("drop", help="Delete all games and moves")

    return parser.parse_args(argv)


def _print_entries(book: OpeningBook, variant: str, fen: str) -> None:
    entries = book.get_entries(variant, fen)
    if not entries:
        print("No book moves")
        return

    print(f"{'move':<8} {'uci':<8} {'plays':>8} {'weight':>8} {'score':>7}")
    for e in entries:
        print(f"{e.san:<8} {e.uci:<8} {e.plays:>8} {e.weight:>8} {e.percent:>6.1f}%")


def _log_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return logging.INFO


def main(argv=None) -> int:
    load_dotenv()
    args = parse_args(argv)

    logging.basicConfig(
        level=_log_level(args),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.from_env(
            store_uri=args.store,
            database_name=args.database,
            max_depth=getattr(args, "depth", None),
            record_separator=decode_separator(getattr(args, "separator", None)),
        )
        read_only = args.command in ("query", "info")

        with OpeningBook(config, read_only=read_only) as book:
            if args.command == "ingest":
                print(book)
                report = book.ingest_files(args.files, jobs=args.jobs)
                print(report)
            elif args.command == "query":
                _print_entries(book, args.variant, args.fen)
            elif args.command == "info":
                for key, value in book.get_info().items():
                    print(f"{key}: {value}")
            elif args.command == "drop":
                book.drop_all()
                print("Book cleared")
    except BookError as e:
        logging.getLogger(__name__).error("%s", e)
        return 1
    except OSError as e:
        logging.getLogger(__name__).error("Cannot read input: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
