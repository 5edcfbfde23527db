"""
Board Module

This module provides the board representation used by move generation and
search, plus conversion and rendering helpers.

Key Components:
    - Board: 8*8 grid of (PieceKind, color) cells with apply_move()
    - PieceKind: Closed enumeration of piece kinds (NONE, PAWN, ... KING)
    - Square / Move: Coordinates and ephemeral move records
    - step(): Coordinate stepping that returns None off the board
    - MoveError and subclasses: Rejected moves
    - render_board / render_unicode: Console rendering
    - to_chess_board / from_chess_board: python-chess interop

Data Flow:
    Board → movegen → Move → Board.apply_move() → game-over flag
"""

from capture_chess.board.state import (
    Board,
    EmptySource,
    IllegalSelfCapture,
    InvalidCoordinate,
    Move,
    MoveError,
    PieceKind,
    Square,
    far_rank,
    home_rank,
    on_board,
    step,
)
from capture_chess.board.representation import (
    board_fen,
    from_chess_board,
    render_board,
    render_unicode,
    to_chess_board,
)

__all__ = [
    'Board',
    'EmptySource',
    'IllegalSelfCapture',
    'InvalidCoordinate',
    'Move',
    'MoveError',
    'PieceKind',
    'Square',
    'far_rank',
    'home_rank',
    'on_board',
    'step',
    'board_fen',
    'from_chess_board',
    'render_board',
    'render_unicode',
    'to_chess_board',
]
