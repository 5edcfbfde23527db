"""
Pseudo-Legal Move Generation

For one occupied square, list the squares its piece may move to. Moves are
pseudo-legal: they follow piece movement and occupancy rules but ignore
whether the mover's own king is left capturable.

Movement Rules:
    - Pawn: one step forward onto an empty square; two steps from the home
      rank when both squares are empty; diagonal-forward captures only
    - Knight: 8 L-shaped jumps
    - Bishop / Rook / Queen: sliding rays that stop at the board edge or the
      first occupied square (included only if it holds an enemy piece)
    - King: 8 single steps (no castling)

Each piece kind maps to one pure function in MOVE_FUNCTIONS. The emission
order of every function is fixed, which makes search results reproducible.
"""

from typing import Callable, Dict, List, Tuple

import chess

from capture_chess.board.state import (
    Board,
    PieceKind,
    Square,
    home_rank,
    on_board,
    step,
)

Offsets = Tuple[Tuple[int, int], ...]

#fmt: off
KNIGHT_OFFSETS: Offsets = (
    ( 2,  1), ( 1,  2), (-1,  2), (-2,  1),
    (-2, -1), (-1, -2), ( 1, -2), ( 2, -1),
)

BISHOP_DIRECTIONS: Offsets = (( 1,  1), (-1,  1), ( 1, -1), (-1, -1))
ROOK_DIRECTIONS: Offsets = (( 1,  0), (-1,  0), ( 0,  1), ( 0, -1))
QUEEN_DIRECTIONS: Offsets = ROOK_DIRECTIONS + BISHOP_DIRECTIONS

KING_OFFSETS: Offsets = (
    ( 1,  0), ( 1,  1), ( 0,  1), (-1,  1),
    (-1,  0), (-1, -1), ( 0, -1), ( 1, -1),
)
#fmt: on


def _can_land(board: Board, target: Square, color: chess.Color) -> bool:
    """True if a piece of `color` may move onto `target` (empty or enemy)."""
    kind, target_color = board.get(target.col, target.row)
    return kind == PieceKind.NONE or target_color != color


def _slide(board: Board, origin: Square, color: chess.Color, directions: Offsets) -> List[Square]:
    """Walk each ray outward until the edge, a friendly piece, or a capture."""
    destinations = []
    for dcol, drow in directions:
        target = step(origin, dcol, drow)
        while target is not None:
            kind, target_color = board.get(target.col, target.row)
            if kind != PieceKind.NONE:
                if target_color != color:
                    destinations.append(target)
                break
            destinations.append(target)
            target = step(target, dcol, drow)
    return destinations


def _jump(board: Board, origin: Square, color: chess.Color, offsets: Offsets) -> List[Square]:
    """Single-step moves to each offset that is on the board and not friendly."""
    destinations = []
    for dcol, drow in offsets:
        target = step(origin, dcol, drow)
        if target is not None and _can_land(board, target, color):
            destinations.append(target)
    return destinations


def pawn_moves(board: Board, origin: Square, color: chess.Color) -> List[Square]:
    """
    Pawn destinations in order: single push, double push, capture toward
    column + 1, capture toward column - 1.

    The double push is only considered when the single push was offered,
    and is itself only offered if its own square is empty.
    """
    forward = 1 if color == chess.WHITE else -1
    destinations = []

    single = step(origin, 0, forward)
    if single is not None and board.piece_at(single.col, single.row) == PieceKind.NONE:
        destinations.append(single)
        if origin.row == home_rank(color):
            double = step(single, 0, forward)
            if double is not None and board.piece_at(double.col, double.row) == PieceKind.NONE:
                destinations.append(double)

    for dcol in (1, -1):
        target = step(origin, dcol, forward)
        if target is None:
            continue
        kind, target_color = board.get(target.col, target.row)
        if kind != PieceKind.NONE and target_color != color:
            destinations.append(target)

    return destinations


def knight_moves(board: Board, origin: Square, color: chess.Color) -> List[Square]:
    return _jump(board, origin, color, KNIGHT_OFFSETS)


def bishop_moves(board: Board, origin: Square, color: chess.Color) -> List[Square]:
    return _slide(board, origin, color, BISHOP_DIRECTIONS)


def rook_moves(board: Board, origin: Square, color: chess.Color) -> List[Square]:
    return _slide(board, origin, color, ROOK_DIRECTIONS)


def queen_moves(board: Board, origin: Square, color: chess.Color) -> List[Square]:
    return _slide(board, origin, color, QUEEN_DIRECTIONS)


def king_moves(board: Board, origin: Square, color: chess.Color) -> List[Square]:
    return _jump(board, origin, color, KING_OFFSETS)


MoveFunction = Callable[[Board, Square, chess.Color], List[Square]]

MOVE_FUNCTIONS: Dict[PieceKind, MoveFunction] = {
    PieceKind.PAWN: pawn_moves,
    PieceKind.ROOK: rook_moves,
    PieceKind.KNIGHT: knight_moves,
    PieceKind.BISHOP: bishop_moves,
    PieceKind.QUEEN: queen_moves,
    PieceKind.KING: king_moves,
}


def destinations(board: Board, col: int, row: int) -> List[Square]:
    """
    List the squares the piece at (col, row) can move to.

    Args:
        board: Current position
        col: Column of the piece (0-7)
        row: Row of the piece (0-7)

    Returns:
        Destination squares in generation order. Empty if the square is
        empty.
    """
    kind, color = board.get(col, row)
    if kind == PieceKind.NONE:
        return []
    return MOVE_FUNCTIONS[kind](board, Square(col, row), color)


def is_valid_move(board: Board, src_col: int, src_row: int, dest_col: int, dest_row: int) -> bool:
    """
    Check a move against the generated destinations of its source square.

    Used to validate human input before applying it. Off-board coordinates
    return False instead of raising.
    """
    if not (on_board(src_col, src_row) and on_board(dest_col, dest_row)):
        return False
    return Square(dest_col, dest_row) in destinations(board, src_col, src_row)
