"""
Board State

This module holds the mutable 8*8 board used by move generation and search.

Storage:
    Two numpy arrays indexed [row, col]:
        - kinds: int8 PieceKind values (0 = empty square)
        - white: bool, True where the occupant is White

Board Orientation:
    - Row 0 = Rank 1 (White's back rank)
    - Row 7 = Rank 8 (Black's back rank)
    - Column 0 = A-file
    - Column 7 = H-file

Simplified Rules:
    - A pawn reaching the far rank is promoted to a Queen automatically
    - Capturing a king ends the game and removes every remaining piece of
      the losing side, so search never looks past the end of the game
    - No check, castling or en passant
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, NamedTuple, Optional, Tuple

import chess
import numpy as np

BOARD_SIZE = 8


class PieceKind(IntEnum):
    """Closed set of piece kinds. NONE marks an empty square."""

    NONE = 0
    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


# Mapping to python-chess piece types (used for rendering and notation)
KIND_TO_CHESS = {
    PieceKind.PAWN: chess.PAWN,
    PieceKind.ROOK: chess.ROOK,
    PieceKind.KNIGHT: chess.KNIGHT,
    PieceKind.BISHOP: chess.BISHOP,
    PieceKind.QUEEN: chess.QUEEN,
    PieceKind.KING: chess.KING,
}

CHESS_TO_KIND = {v: k for k, v in KIND_TO_CHESS.items()}

BACK_RANK = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Square(NamedTuple):
    """A board coordinate. Both fields are always within [0, 7]."""

    col: int
    row: int

    def name(self) -> str:
        """Algebraic name of the square, e.g. 'b1'."""
        return chess.square_name(chess.square(self.col, self.row))


def on_board(col: int, row: int) -> bool:
    """Return True if (col, row) lies on the board."""
    return 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE


def step(square: Square, dcol: int, drow: int) -> Optional[Square]:
    """
    Offset a square by (dcol, drow).

    Returns:
        The resulting Square, or None if the step leaves the board
    """
    col = square.col + dcol
    row = square.row + drow
    if not on_board(col, row):
        return None
    return Square(col, row)


def home_rank(color: chess.Color) -> int:
    """Row on which pawns of the given color start."""
    return 1 if color == chess.WHITE else 6


def far_rank(color: chess.Color) -> int:
    """Row on which pawns of the given color promote."""
    return 7 if color == chess.WHITE else 0


@dataclass(frozen=True)
class Move:
    """
    A single move from one square to another.

    Moves carry no piece information; they are produced by the move
    generator and consumed immediately by search or by Board.apply_move().
    """

    src_col: int
    src_row: int
    dest_col: int
    dest_row: int

    @property
    def src(self) -> Square:
        return Square(self.src_col, self.src_row)

    @property
    def dest(self) -> Square:
        return Square(self.dest_col, self.dest_row)

    @classmethod
    def between(cls, src: Square, dest: Square) -> "Move":
        """Build a move from two squares."""
        return cls(src.col, src.row, dest.col, dest.row)

    def uci(self) -> str:
        """Coordinate notation, e.g. 'b1c3'."""
        return self.src.name() + self.dest.name()

    def __str__(self) -> str:
        return self.uci()


class MoveError(ValueError):
    """Base class for moves that Board.apply_move() refuses."""


class InvalidCoordinate(MoveError):
    """A source or destination coordinate lies outside [0, 7]."""


class EmptySource(MoveError):
    """There is no piece on the source square."""


class IllegalSelfCapture(MoveError):
    """The destination holds a piece of the mover's own color."""


class Board:
    """
    8*8 board of (PieceKind, color) cells.

    Boards are value-like: copy() returns an independent clone, and search
    gives every branch its own clone.

    Attributes:
        kinds: (8, 8) int8 array of PieceKind values, indexed [row, col]
        white: (8, 8) bool array, True where the occupant is White
    """

    def __init__(self):
        """Create an empty board. Use Board.standard() for the opening layout."""
        self.kinds = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self.white = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=bool)

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def standard(cls) -> "Board":
        """Create a board set up for a new game."""
        board = cls()
        board.reset()
        return board

    def copy(self) -> "Board":
        """Return an independent clone of this board."""
        clone = Board.__new__(Board)
        clone.kinds = self.kinds.copy()
        clone.white = self.white.copy()
        return clone

    def get(self, col: int, row: int) -> Tuple[PieceKind, chess.Color]:
        """
        Return (kind, color) at (col, row).

        The color is only meaningful when kind is not PieceKind.NONE.
        """
        return PieceKind(int(self.kinds[row, col])), bool(self.white[row, col])

    def piece_at(self, col: int, row: int) -> PieceKind:
        return PieceKind(int(self.kinds[row, col]))

    def is_white(self, col: int, row: int) -> bool:
        return bool(self.white[row, col])

    def set(self, col: int, row: int, kind: PieceKind, color: chess.Color = chess.WHITE):
        """
        Place a piece at (col, row). If kind is NONE the color is ignored
        and the square is cleared.
        """
        self.kinds[row, col] = int(kind)
        self.white[row, col] = bool(color) if kind != PieceKind.NONE else False

    def clear(self):
        """Remove every piece from the board."""
        self.kinds.fill(0)
        self.white.fill(False)

    def reset(self):
        """Set up the standard opening layout."""
        self.clear()
        for col, kind in enumerate(BACK_RANK):
            self.set(col, 0, kind, chess.WHITE)
            self.set(col, 1, PieceKind.PAWN, chess.WHITE)
            self.set(col, 6, PieceKind.PAWN, chess.BLACK)
            self.set(col, 7, kind, chess.BLACK)

    def squares(self, color: Optional[chess.Color] = None) -> Iterator[Square]:
        """
        Yield occupied squares in row-major order (row 0 first, then
        column 0 first within a row).

        Args:
            color: If given, only squares holding pieces of this color
        """
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.kinds[row, col] == PieceKind.NONE:
                    continue
                if color is not None and bool(self.white[row, col]) != color:
                    continue
                yield Square(col, row)

    def piece_count(self, color: Optional[chess.Color] = None) -> int:
        occupied = self.kinds != PieceKind.NONE
        if color is None:
            return int(occupied.sum())
        side = self.white if color == chess.WHITE else ~self.white
        return int((occupied & side).sum())

    def apply_move(self, src_col: int, src_row: int, dest_col: int, dest_row: int) -> bool:
        """
        Move the piece at the source square to the destination square.

        A pawn landing on its far rank becomes a Queen. Capturing a king
        removes every remaining piece of the king's color.

        Returns:
            bool: True if this move captured a king and ended the game

        Raises:
            InvalidCoordinate: If either square is off the board
            EmptySource: If the source square is empty
            IllegalSelfCapture: If the destination holds a piece of the
                mover's own color
        """
        if not on_board(src_col, src_row):
            raise InvalidCoordinate(f"Source square out of range: ({src_col}, {src_row})")
        if not on_board(dest_col, dest_row):
            raise InvalidCoordinate(f"Destination square out of range: ({dest_col}, {dest_row})")

        kind, color = self.get(src_col, src_row)
        if kind == PieceKind.NONE:
            raise EmptySource(f"No piece on source square {Square(src_col, src_row).name()}")

        target, target_color = self.get(dest_col, dest_row)
        if target != PieceKind.NONE and target_color == color:
            raise IllegalSelfCapture(
                f"Cannot capture own piece on {Square(dest_col, dest_row).name()}"
            )

        if kind == PieceKind.PAWN and dest_row == far_rank(color):
            kind = PieceKind.QUEEN

        self.set(dest_col, dest_row, kind, color)
        self.set(src_col, src_row, PieceKind.NONE)

        if target == PieceKind.KING:
            # Remove the losing side entirely so search stops here
            losers = self.white if target_color == chess.WHITE else ~self.white
            self.kinds[losers] = PieceKind.NONE
            self.white[losers] = False
            return True
        return False

    def push(self, move: Move) -> bool:
        """Apply a Move object. See apply_move()."""
        return self.apply_move(move.src_col, move.src_row, move.dest_col, move.dest_row)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(
            np.array_equal(self.kinds, other.kinds)
            and np.array_equal(self.white, other.white)
        )

    def __repr__(self) -> str:
        return (
            f"Board(white={self.piece_count(chess.WHITE)}, "
            f"black={self.piece_count(chess.BLACK)})"
        )
