"""
Full-Width Minimax

Plain minimax with no pruning. It visits every node to the given depth
and applies the same strict-improvement tie-break as alpha_beta(), so both
searches must choose the same move for a deterministic evaluator. Used to
verify the pruning and to measure how many nodes it saves.
"""

from typing import Optional

import chess

from capture_chess.board.state import Board
from capture_chess.evaluation.base import INFINITY, Evaluator
from capture_chess.movegen.sequence import iter_moves
from capture_chess.search.node import SearchResult, SearchStats, make_child, opponent


def minimax(
    board: Board,
    depth: int,
    color: chess.Color,
    evaluator: Evaluator,
    game_over: bool = False,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Unpruned minimax search.

    Args:
        board: Current position (never mutated)
        depth: Remaining search depth in plies
        color: Side to move (chess.WHITE maximises, chess.BLACK minimises)
        evaluator: Position evaluation function
        game_over: True if the move leading here captured a king
        stats: Optional counters to update

    Returns:
        SearchResult: Exact minimax score and the first move achieving it
    """
    if stats is not None:
        stats.nodes += 1

    if depth == 0 or game_over:
        return SearchResult(evaluator.evaluate(board))

    maximizing = color == chess.WHITE
    best_value = -INFINITY if maximizing else INFINITY
    best_move = None

    for move in iter_moves(board, color):
        child, child_over = make_child(board, move)
        value = minimax(child, depth - 1, opponent(color), evaluator, child_over, stats).score

        if (maximizing and value > best_value) or (not maximizing and value < best_value):
            best_value = value
            best_move = move

    return SearchResult(best_value, best_move)
