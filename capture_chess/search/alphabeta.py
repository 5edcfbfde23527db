"""
Alpha-Beta Search

This module implements the engine's depth-bounded minimax search with
alpha-beta pruning.

Key Concepts:
    - Minimax: White maximises the score, Black minimises it
    - Alpha-Beta: Skip the rest of a frame's moves once the opponent would
      never allow this line (beta <= alpha)
    - Clone per branch: every child frame owns a fresh copy of the board
    - Fixed move order: moves are tried in board-scan order, and a move
      only replaces the recorded best move when it is strictly better, so
      the first of several equal moves wins

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor (~20-40), d=depth
    - Alpha-Beta: between O(b^(d/2)) and O(b^d) depending on move order

References:
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
from typing import Optional

import chess

from capture_chess.board.state import Board
from capture_chess.evaluation.base import INFINITY, Evaluator
from capture_chess.movegen.sequence import iter_moves
from capture_chess.search.node import SearchResult, SearchStats, make_child

logger = logging.getLogger(__name__)


def alpha_beta(
    board: Board,
    depth: int,
    alpha: int,
    beta: int,
    color: chess.Color,
    evaluator: Evaluator,
    game_over: bool = False,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Minimax search with alpha-beta pruning.

    Args:
        board: Current position (never mutated)
        depth: Remaining search depth in plies
        alpha: Best score White is already guaranteed
        beta: Best score Black is already guaranteed
        color: Side to move (chess.WHITE maximises, chess.BLACK minimises)
        evaluator: Position evaluation function
        game_over: True if the move leading here captured a king
        stats: Optional counters to update

    Returns:
        SearchResult: Backed-up score and the move that set this frame's
        alpha (White) or beta (Black), if any

    Raises:
        SearchInvariantError: If a generated move cannot be applied
    """
    if stats is not None:
        stats.nodes += 1

    # Leaf node: depth exhausted or a king was just captured
    if depth == 0 or game_over:
        return SearchResult(evaluator.evaluate(board))

    best_move = None

    if color == chess.WHITE:
        best_value = -INFINITY
        for move in iter_moves(board, color):
            child, child_over = make_child(board, move)
            value = alpha_beta(
                child, depth - 1, alpha, beta, chess.BLACK, evaluator, child_over, stats
            ).score

            best_value = max(best_value, value)
            if best_value > alpha:
                alpha = best_value
                best_move = move

            # Beta cutoff: Black will never allow this line
            if beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break
    else:
        best_value = INFINITY
        for move in iter_moves(board, color):
            child, child_over = make_child(board, move)
            value = alpha_beta(
                child, depth - 1, alpha, beta, chess.WHITE, evaluator, child_over, stats
            ).score

            best_value = min(best_value, value)
            if best_value < beta:
                beta = best_value
                best_move = move

            # Alpha cutoff: White will never allow this line
            if beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break

    return SearchResult(best_value, best_move)


def find_best_move(
    board: Board,
    depth: int,
    color: chess.Color,
    evaluator: Evaluator,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Find the best move for `color` in the current position.

    Args:
        board: Current position (never mutated)
        depth: Search depth in plies (must be at least 1)
        color: Side to move
        evaluator: Position evaluation function
        stats: Optional counters to update

    Returns:
        SearchResult with a non-None move

    Raises:
        ValueError: If depth < 1 or `color` has no moves
    """
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    stats = stats if stats is not None else SearchStats()
    result = alpha_beta(board, depth, -INFINITY, INFINITY, color, evaluator, stats=stats)

    if result.move is None:
        # Every move scored the initial bound (e.g. all lines run out of
        # moves); keep the first one in scan order
        fallback = next(iter_moves(board, color), None)
        if fallback is None:
            raise ValueError(f"No moves available for {chess.COLOR_NAMES[color]}")
        result = SearchResult(result.score, fallback)

    logger.debug(
        f"Search complete: side={chess.COLOR_NAMES[color]}, depth={depth}, "
        f"best_move={result.move}, score={result.score}, "
        f"nodes={stats.nodes}, cutoffs={stats.cutoffs}"
    )
    return result
