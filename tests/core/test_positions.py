"""
Tests for pgn_book.core.positions
"""

import chess
import chess.variant
import pytest

from pgn_book.core.positions import board_key, position_key, white_to_move


class TestPositionKey:

    def test_fen_reduced_to_epd(self, start_epd):
        """Move counters are dropped from a full FEN."""
        assert position_key(chess.STARTING_FEN) == start_epd

    def test_epd_unchanged(self, start_epd):
        assert position_key(start_epd) == start_epd

    def test_surrounding_whitespace(self, start_epd):
        assert position_key("  " + start_epd + "\n") == start_epd

    def test_unusable_en_passant_square_dropped(self, after_e4_epd):
        """A FEN naming e3 after 1.e4 keys the same as python-chess writes it."""
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        assert position_key(fen) == after_e4_epd

    def test_legal_en_passant_square_kept(self):
        fen = "rnbqkbnr/ppp1p1pp/8/3pPp2/8/8/PPPP1PPP/RNBQKBNR w KQkq f6 0 3"
        assert position_key(fen).endswith(" f6")

    def test_matches_board_key(self):
        board = chess.Board()
        for san in ("e4", "c5", "Nf3"):
            board.push_san(san)
        assert position_key(board.fen()) == board_key(board)

    def test_threecheck_keeps_check_counts(self):
        board = chess.variant.ThreeCheckBoard()
        assert position_key(chess.STARTING_FEN, "threecheck") == board_key(board)
        assert position_key(board.epd(), "threecheck").endswith("3+3")

    def test_crazyhouse_pockets(self):
        board = chess.variant.CrazyhouseBoard()
        assert position_key(board.fen(), "crazyhouse") == board_key(board)

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            position_key("not a position")


class TestWhiteToMove:

    def test_white(self, start_epd):
        assert white_to_move(start_epd) is True

    def test_black(self, after_e4_epd):
        assert white_to_move(after_e4_epd) is False

    @pytest.mark.parametrize("position", ["", "8/8/8/8/8/8/8/8", "8/8/8/8/8/8/8/8 x - -"])
    def test_malformed_raises(self, position):
        """Missing or invalid side-to-move field raises ValueError."""
        with pytest.raises(ValueError):
            white_to_move(position)
