"""
Tests for pgn_book.ingest.scoring
"""

import numpy as np
import pytest

from pgn_book.core.types import DRAW, LOSS, WIN
from pgn_book.ingest.scoring import outcome_weights, result_ordinal


class TestResultOrdinal:

    @pytest.mark.parametrize("result,expected", [
        ("1-0", WIN),
        ("0-1", LOSS),
        ("1/2-1/2", DRAW),
        ("*", DRAW),
        ("", DRAW),
        (None, DRAW),
        ("white wins", DRAW),
        (" 1-0 ", WIN),
    ])
    def test_ordinals(self, result, expected):
        """Unknown or absent results count as draws."""
        assert result_ordinal(result) == expected


class TestOutcomeWeights:

    def test_white_win(self):
        """Winner's plies score 2, loser's plies score 0."""
        weights = outcome_weights(WIN, [True, False, True, False])
        assert weights.tolist() == [2, 0, 2, 0]

    def test_black_win(self):
        weights = outcome_weights(LOSS, [True, False])
        assert weights.tolist() == [0, 2]

    def test_draw_symmetric(self):
        """Draws score 1 for both sides."""
        weights = outcome_weights(DRAW, [True, False, False, True])
        assert weights.tolist() == [1, 1, 1, 1]

    def test_empty(self):
        assert outcome_weights(WIN, []).size == 0

    def test_dtype(self):
        assert outcome_weights(WIN, [True]).dtype == np.int8

    def test_within_range(self):
        """Every weight is in 0..2 for every ordinal."""
        movers = [True, False] * 5
        for ordinal in (LOSS, DRAW, WIN):
            weights = outcome_weights(ordinal, movers)
            assert weights.min() >= 0 and weights.max() <= 2
