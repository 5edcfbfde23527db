"""
Engine API

The small surface used by presentation layers (console driver, tools):
create a board, validate a human move, ask the engine for a move, and
apply a move.
"""

import random
from typing import Optional, Tuple

import chess

from capture_chess.board.state import Board, Move
from capture_chess.evaluation.material import MaterialEvaluator
from capture_chess.movegen.generator import is_valid_move
from capture_chess.search.alphabeta import find_best_move


def new_standard_board() -> Board:
    """Board set up for a new game."""
    return Board.standard()


def best_move(
    board: Board,
    depth: int,
    side_to_move: chess.Color,
    rng: Optional[random.Random] = None,
    jitter: int = 1,
) -> Move:
    """
    Search `depth` plies and return the move chosen for `side_to_move`.

    Args:
        board: Current position (not modified)
        depth: Search depth in plies (>= 1)
        side_to_move: chess.WHITE or chess.BLACK
        rng: Random source for evaluation jitter (seed it to reproduce)
        jitter: Maximum absolute jitter (0 for a deterministic search)

    Raises:
        ValueError: If depth < 1 or the side has no moves
    """
    evaluator = MaterialEvaluator(rng=rng, jitter=jitter)
    return find_best_move(board, depth, side_to_move, evaluator).move


def apply_move(board: Board, move: Move) -> Tuple[Board, bool]:
    """
    Play `move` on a copy of `board`.

    Returns:
        (new board, game over)

    Raises:
        MoveError: If the move is rejected (see Board.apply_move)
    """
    result = board.copy()
    game_over = result.push(move)
    return result, game_over


__all__ = ['new_standard_board', 'is_valid_move', 'best_move', 'apply_move']
