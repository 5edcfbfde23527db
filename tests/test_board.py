"""
Unit Tests for Board Module

Tests for the board representation, focusing on:
    - Opening layout and accessors
    - Cloning (value semantics)
    - apply_move(): errors, promotion, king capture
    - Coordinate helpers (step, Square, Move)
    - Rendering and python-chess conversion
"""

import chess
import pytest

from capture_chess.board import (
    Board,
    EmptySource,
    IllegalSelfCapture,
    InvalidCoordinate,
    Move,
    MoveError,
    PieceKind,
    Square,
    board_fen,
    from_chess_board,
    render_board,
    step,
    to_chess_board,
)


class TestBoardLayout:
    """Tests for board setup and accessors."""

    @pytest.fixture
    def board(self):
        """Create a board in the opening position."""
        return Board.standard()

    def test_standard_piece_counts(self, board):
        """Test that each side starts with 16 pieces."""
        assert board.piece_count(chess.WHITE) == 16, "White should have 16 pieces"
        assert board.piece_count(chess.BLACK) == 16, "Black should have 16 pieces"
        assert board.piece_count() == 32

    def test_back_ranks(self, board):
        """Test the back rank order on both sides."""
        expected = [
            PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.QUEEN,
            PieceKind.KING, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK,
        ]
        for col, kind in enumerate(expected):
            assert board.get(col, 0) == (kind, chess.WHITE), f"Wrong white piece on column {col}"
            assert board.get(col, 7) == (kind, chess.BLACK), f"Wrong black piece on column {col}"

    def test_pawn_ranks_and_empty_middle(self, board):
        """Test pawn rows and the empty middle of the board."""
        for col in range(8):
            assert board.piece_at(col, 1) == PieceKind.PAWN
            assert board.is_white(col, 1)
            assert board.piece_at(col, 6) == PieceKind.PAWN
            assert not board.is_white(col, 6)
            for row in range(2, 6):
                assert board.piece_at(col, row) == PieceKind.NONE

    def test_reset_restores_opening(self, board):
        """Test that reset() undoes arbitrary changes."""
        board.set(4, 4, PieceKind.QUEEN, chess.BLACK)
        board.set(0, 0, PieceKind.NONE)
        board.reset()

        assert board == Board.standard(), "reset() should restore the opening layout"

    def test_set_none_clears_square(self, board):
        """Test that setting NONE empties a square regardless of color."""
        board.set(0, 0, PieceKind.NONE, chess.WHITE)

        kind, _ = board.get(0, 0)
        assert kind == PieceKind.NONE
        assert board.piece_count(chess.WHITE) == 15

    def test_squares_row_major(self, board):
        """Test that squares() scans row 0 first, column 0 first."""
        white_squares = list(board.squares(chess.WHITE))

        assert white_squares[0] == Square(0, 0)
        assert white_squares[7] == Square(7, 0)
        assert white_squares[8] == Square(0, 1)
        assert len(white_squares) == 16


class TestBoardCopy:
    """Tests for board cloning."""

    def test_copy_is_equal(self):
        """Test that a copy compares equal to its source."""
        board = Board.standard()
        assert board.copy() == board

    def test_copy_is_independent(self):
        """Test that mutating a clone never affects the original."""
        board = Board.standard()
        clone = board.copy()

        clone.apply_move(4, 1, 4, 3)

        assert board.piece_at(4, 1) == PieceKind.PAWN, "Original should be untouched"
        assert board.piece_at(4, 3) == PieceKind.NONE
        assert clone != board


class TestApplyMove:
    """Tests for Board.apply_move()."""

    @pytest.fixture
    def board(self):
        return Board.standard()

    def test_simple_move(self, board):
        """Test that a move clears the source and fills the destination."""
        game_over = board.apply_move(1, 0, 2, 2)

        assert game_over is False
        assert board.get(2, 2) == (PieceKind.KNIGHT, chess.WHITE)
        assert board.piece_at(1, 0) == PieceKind.NONE

    @pytest.mark.parametrize("coords", [
        (8, 0, 0, 0),
        (0, -1, 0, 0),
        (0, 1, 0, 8),
        (0, 1, -1, 2),
    ])
    def test_invalid_coordinate(self, board, coords):
        """Test that off-board squares are rejected."""
        with pytest.raises(InvalidCoordinate):
            board.apply_move(*coords)

    def test_empty_source(self, board):
        """Test that moving from an empty square is rejected."""
        with pytest.raises(EmptySource):
            board.apply_move(3, 3, 3, 4)

    def test_self_capture(self, board):
        """Test that capturing an own piece is rejected."""
        with pytest.raises(IllegalSelfCapture):
            board.apply_move(0, 0, 0, 1)

    def test_errors_share_base_class(self, board):
        """Test that all rejections are MoveError and ValueError."""
        for coords in [(9, 9, 0, 0), (3, 3, 3, 4), (0, 0, 0, 1)]:
            with pytest.raises(MoveError):
                board.apply_move(*coords)
            with pytest.raises(ValueError):
                board.apply_move(*coords)

    def test_failed_move_leaves_board_unchanged(self, board):
        """Test that a rejected move does not modify the board."""
        before = board.copy()
        with pytest.raises(IllegalSelfCapture):
            board.apply_move(3, 0, 3, 1)
        assert board == before

    def test_capture_returns_false_for_non_king(self):
        """Test that ordinary captures do not end the game."""
        board = from_chess_board("4k3/8/8/3p4/4P3/8/8/4K3")

        game_over = board.apply_move(4, 3, 3, 4)

        assert game_over is False
        assert board.get(3, 4) == (PieceKind.PAWN, chess.WHITE)
        assert board.piece_count(chess.BLACK) == 1

    def test_white_pawn_promotes(self):
        """Test that a white pawn reaching row 7 becomes a white queen."""
        board = from_chess_board("4k3/P7/8/8/8/8/8/4K3")

        board.apply_move(0, 6, 0, 7)

        assert board.get(0, 7) == (PieceKind.QUEEN, chess.WHITE)

    def test_black_pawn_promotes(self):
        """Test that a black pawn reaching row 0 becomes a black queen."""
        board = from_chess_board("4k3/8/8/8/8/8/1p6/4K3")

        board.apply_move(1, 1, 1, 0)

        assert board.get(1, 0) == (PieceKind.QUEEN, chess.BLACK)

    def test_promotion_with_capture(self):
        """Test promotion on a capturing move."""
        board = from_chess_board("1r2k3/P7/8/8/8/8/8/4K3")

        board.apply_move(0, 6, 1, 7)

        assert board.get(1, 7) == (PieceKind.QUEEN, chess.WHITE)

    def test_pawn_not_promoted_before_far_rank(self):
        """Test that a pawn stays a pawn below the far rank."""
        board = from_chess_board("4k3/8/P7/8/8/8/8/4K3")

        board.apply_move(0, 5, 0, 6)

        assert board.piece_at(0, 6) == PieceKind.PAWN

    def test_king_capture_scenario(self):
        """
        Test the rook-takes-king scenario.

        Only a White king, a Black king and a White rook are on the board.
        Capturing the Black king leaves exactly the White king and rook.
        """
        board = from_chess_board("4k3/8/8/8/8/8/4R3/4K3")

        game_over = board.apply_move(4, 1, 4, 7)

        assert game_over is True, "Capturing the king should end the game"
        assert board.piece_count() == 2
        assert board.get(4, 7) == (PieceKind.ROOK, chess.WHITE)
        assert board.get(4, 0) == (PieceKind.KING, chess.WHITE)

    def test_king_capture_purges_losing_side(self):
        """Test that every remaining piece of the losing color is removed."""
        board = from_chess_board("rnbqkbnr/pppp1ppp/8/8/8/8/8/4K2q")

        game_over = board.apply_move(7, 0, 4, 0)

        assert game_over is True
        assert board.piece_count(chess.WHITE) == 0, "White should be wiped out"
        assert board.piece_count(chess.BLACK) == 16
        assert board.get(4, 0) == (PieceKind.QUEEN, chess.BLACK)


class TestCoordinates:
    """Tests for Square, Move and step()."""

    def test_step_on_board(self):
        """Test stepping inside the board."""
        assert step(Square(0, 0), 1, 2) == Square(1, 2)

    def test_step_off_board_is_none(self):
        """Test that leaving the board yields None, never a 0 coordinate."""
        assert step(Square(0, 0), -1, 0) is None
        assert step(Square(7, 7), 0, 1) is None
        assert step(Square(1, 0), -1, 0) == Square(0, 0)

    def test_square_name(self):
        assert Square(1, 0).name() == "b1"
        assert Square(7, 7).name() == "h8"

    def test_move_uci(self):
        """Test coordinate notation for moves."""
        move = Move(1, 0, 2, 2)

        assert move.uci() == "b1c3"
        assert str(move) == "b1c3"
        assert move.src == Square(1, 0)
        assert move.dest == Square(2, 2)
        assert Move.between(Square(1, 0), Square(2, 2)) == move


class TestRepresentation:
    """Tests for rendering and python-chess conversion."""

    def test_standard_fen(self):
        """Test that the opening converts to the standard placement FEN."""
        assert board_fen(Board.standard()) == chess.STARTING_BOARD_FEN

    def test_from_full_fen(self):
        """Test that a full FEN (with side to move etc.) is accepted."""
        assert from_chess_board(chess.STARTING_FEN) == Board.standard()

    def test_round_trip_through_python_chess(self):
        """Test conversion of a mid-game position."""
        fen = "r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R"
        board = from_chess_board(chess.Board(fen + " w KQkq - 0 1"))

        assert to_chess_board(board).board_fen() == fen

    def test_render_board(self):
        """Test the ASCII diagram of the opening position."""
        text = render_board(Board.standard())
        lines = text.splitlines()

        assert lines[0] == "  A  B  C  D  E  F  G  H"
        assert lines[1] == " +--+--+--+--+--+--+--+--+"
        assert lines[2] == "8|br|bn|bb|bq|bK|bb|bn|br|8", "Rank 8 should be on top"
        assert lines[4] == "7|bp|bp|bp|bp|bp|bp|bp|bp|7"
        assert lines[6] == "6|  |  |  |  |  |  |  |  |6"
        assert lines[16] == "1|wr|wn|wb|wq|wK|wb|wn|wr|1"
        assert lines[-1] == "  A  B  C  D  E  F  G  H"
