"""
Search Node Helpers

Types and helpers shared by the alpha-beta and full-width searches.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import chess

from capture_chess.board.state import Board, Move, MoveError


class SearchInvariantError(RuntimeError):
    """A move produced by the move generator was rejected by the board."""


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of one search frame.

    Attributes:
        score: Backed-up score from White's perspective
        move: Move realising the score at this frame, or None at terminal
            frames and when the side to move has no moves
    """

    score: int
    move: Optional[Move] = None


@dataclass
class SearchStats:
    """
    Counters filled in by a search when passed in.

    Attributes:
        nodes: Frames visited (including terminal frames)
        cutoffs: Frames that stopped early on a beta/alpha cutoff
    """

    nodes: int = 0
    cutoffs: int = 0


def make_child(board: Board, move: Move) -> Tuple[Board, bool]:
    """
    Clone `board` and play `move` on the clone.

    Returns:
        (child board, game over)

    Raises:
        SearchInvariantError: If the board rejects a generated move
    """
    child = board.copy()
    try:
        game_over = child.push(move)
    except MoveError as e:
        raise SearchInvariantError(f"Generated move {move} was rejected: {e}") from e
    return child, game_over


def opponent(color: chess.Color) -> chess.Color:
    return not color
