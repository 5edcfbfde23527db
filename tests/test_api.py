"""
Unit Tests for the Engine API

Tests for the surface used by presentation layers:
    - new_standard_board / is_valid_move
    - best_move (seeded, both colors)
    - apply_move (copy semantics, errors, king capture)
"""

import random

import chess
import pytest

from capture_chess import api
from capture_chess.board import Board, EmptySource, Move, PieceKind, from_chess_board
from capture_chess.movegen import legal_moves


class TestEngineApi:
    """Tests for capture_chess.api."""

    @pytest.fixture
    def board(self):
        return api.new_standard_board()

    def test_new_standard_board(self, board):
        assert board == Board.standard()

    def test_is_valid_move_scenario(self, board):
        """Test a2-a4 accepted and a2-a5 rejected on the opening board."""
        assert api.is_valid_move(board, 0, 1, 0, 3) is True
        assert api.is_valid_move(board, 0, 1, 0, 4) is False

    @pytest.mark.parametrize("color", [chess.WHITE, chess.BLACK])
    def test_best_move_is_generated_move(self, board, color):
        """Test that the engine only returns generated moves."""
        move = api.best_move(board, 2, color, random.Random(11))

        assert move in legal_moves(board, color)

    def test_best_move_reproducible(self, board):
        """Test that the same seed gives the same move."""
        first = api.best_move(board, 2, chess.WHITE, random.Random(5))
        second = api.best_move(board, 2, chess.WHITE, random.Random(5))

        assert first == second

    def test_best_move_without_jitter(self, board):
        """Test that jitter=0 makes the choice independent of the seed."""
        moves = {api.best_move(board, 1, chess.WHITE, random.Random(s), jitter=0) for s in range(5)}

        assert moves == {Move(1, 0, 2, 2)}

    def test_apply_move_returns_new_board(self, board):
        """Test that apply_move leaves the input board untouched."""
        result, game_over = api.apply_move(board, Move(4, 1, 4, 3))

        assert game_over is False
        assert result.get(4, 3) == (PieceKind.PAWN, chess.WHITE)
        assert board == Board.standard(), "Input board must not change"

    def test_apply_move_error(self, board):
        with pytest.raises(EmptySource):
            api.apply_move(board, Move(4, 4, 4, 5))

    def test_apply_move_king_capture(self):
        """Test the K+R vs K scenario through the API."""
        board = from_chess_board("4k3/8/8/8/8/8/4R3/4K3")

        result, game_over = api.apply_move(board, Move(4, 1, 4, 7))

        assert game_over is True
        assert result.piece_count(chess.BLACK) == 0
        assert result.piece_count(chess.WHITE) == 2
