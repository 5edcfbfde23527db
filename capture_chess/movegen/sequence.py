"""
Move Sequence

Enumerates every pseudo-legal move for one side. The order is fixed: squares
are scanned row by row (row 0 first, column 0 first within a row), and each
owned square's destinations are emitted in generator order before the scan
moves on. Search relies on this order for its first-found tie-break.
"""

from typing import Iterator, List

import chess

from capture_chess.board.state import Board, Move
from capture_chess.movegen.generator import destinations


def iter_moves(board: Board, color: chess.Color) -> Iterator[Move]:
    """
    Lazily yield all moves for `color`.

    The generator is single-pass. Build a new one for each position; do not
    mutate `board` while it is being consumed.
    """
    for origin in board.squares(color):
        for target in destinations(board, origin.col, origin.row):
            yield Move.between(origin, target)


def legal_moves(board: Board, color: chess.Color) -> List[Move]:
    """All moves for `color`, collected into a list."""
    return list(iter_moves(board, color))
