"""
Board Conversion and Rendering

This module converts between the engine's Board and python-chess Board
objects, and renders boards as text for the console.

Conversions:
    Board → to_chess_board() → chess.Board   (Unicode rendering, FEN export)
    FEN / chess.Board → from_chess_board() → Board   (test positions)

Only piece placement is converted. Side to move, castling rights and en
passant squares have no meaning under the simplified rules.

ASCII Layout (render_board):
      A  B  C  D  E  F  G  H
     +--+--+--+--+--+--+--+--+
    8|br|bn|bb|bq|bK|bb|bn|br|8
     +--+--+--+--+--+--+--+--+
    ...
    Each occupied cell is a color letter (w/b) followed by a piece letter
    (p, r, n, b, q, K).
"""

from typing import Union

import chess

from capture_chess.board.state import (
    BOARD_SIZE,
    CHESS_TO_KIND,
    KIND_TO_CHESS,
    Board,
    PieceKind,
)

PIECE_LETTERS = {
    PieceKind.PAWN: "p",
    PieceKind.ROOK: "r",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "K",
}

COLUMN_HEADER = "  A  B  C  D  E  F  G  H"
ROW_SEPARATOR = " +" + "--+" * BOARD_SIZE


def to_chess_board(board: Board) -> chess.Board:
    """
    Convert a Board to a python-chess Board (piece placement only).

    Args:
        board: Engine board

    Returns:
        python-chess Board with White to move and no castling rights
    """
    result = chess.Board(fen=None)
    for square in board.squares():
        kind, color = board.get(square.col, square.row)
        result.set_piece_at(
            chess.square(square.col, square.row),
            chess.Piece(KIND_TO_CHESS[kind], color),
        )
    return result


def from_chess_board(source: Union[chess.Board, str]) -> Board:
    """
    Build a Board from a python-chess Board or a FEN string.

    Args:
        source: python-chess Board, or a FEN (full or placement-only)

    Returns:
        Engine Board with the same piece placement

    Raises:
        ValueError: If the FEN cannot be parsed
    """
    if isinstance(source, str):
        placement = source.split()[0]
        source = chess.BaseBoard(placement)

    board = Board.empty()
    for square, piece in source.piece_map().items():
        board.set(
            chess.square_file(square),
            chess.square_rank(square),
            CHESS_TO_KIND[piece.piece_type],
            piece.color,
        )
    return board


def board_fen(board: Board) -> str:
    """Piece placement part of the FEN for this board."""
    return to_chess_board(board).board_fen()


def render_board(board: Board) -> str:
    """
    Render a board as ASCII text, rank 8 at the top.

    Args:
        board: Board to render

    Returns:
        Multi-line string (no trailing newline)
    """
    lines = [COLUMN_HEADER, ROW_SEPARATOR]
    for row in range(BOARD_SIZE - 1, -1, -1):
        cells = []
        for col in range(BOARD_SIZE):
            kind, white = board.get(col, row)
            if kind == PieceKind.NONE:
                cells.append("  ")
            else:
                cells.append(("w" if white else "b") + PIECE_LETTERS[kind])
        label = str(row + 1)
        lines.append(f"{label}|{'|'.join(cells)}|{label}")
        lines.append(ROW_SEPARATOR)
    lines.append(COLUMN_HEADER)
    return "\n".join(lines)


def render_unicode(board: Board) -> str:
    """Render a board with Unicode chess symbols via python-chess."""
    return to_chess_board(board).unicode(empty_square=".")
