"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
Search only depends on this interface, so evaluators can be swapped
without touching the search code.

Key Principles:
    1. evaluate() always scores from White's perspective
    2. Positive = White advantage, Negative = Black advantage
    3. Scores are integers in material units (pawn = 10)
    4. Any randomness comes from an explicit random source owned by the
       evaluator, so a fixed seed reproduces a whole search
"""

from abc import ABC, abstractmethod

from capture_chess.board.state import Board

# Search window bound. No reachable evaluation comes close to this.
INFINITY = 100000


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Methods:
        evaluate(board): Returns the position score from White's perspective
    """

    @abstractmethod
    def evaluate(self, board: Board) -> int:
        """
        Evaluate a position from White's perspective.

        Args:
            board: Position to evaluate

        Returns:
            int: Score (positive favours White)
        """
        pass

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
