"""
Material Evaluation

Scores a position by material balance plus a small pseudo-random jitter.

Evaluation Components:
    - Material: P=10, N=31, B=36, R=63, Q=88, K=500
      (White pieces add, Black pieces subtract)
    - Jitter: integer in [-jitter, +jitter], default {-1, 0, +1}

The jitter stops two engines from replaying the same moves forever in
self-play. Each evaluator draws one salt from its random.Random and hashes
it together with the position, so a position always gets the same jitter
from the same evaluator. Seeding the source reproduces every search, and
the jitter does not depend on how many positions were scored before, so
pruning never changes a leaf value.
"""

import random
import zlib
from typing import Optional

import numpy as np

from capture_chess.board.state import Board, PieceKind
from capture_chess.evaluation.base import Evaluator

PIECE_VALUES = {
    PieceKind.NONE: 0,
    PieceKind.PAWN: 10,
    PieceKind.ROOK: 63,
    PieceKind.KNIGHT: 31,
    PieceKind.BISHOP: 36,
    PieceKind.QUEEN: 88,
    PieceKind.KING: 500,
}

# Indexed by PieceKind value, for vectorised lookups over Board.kinds
VALUE_TABLE = np.array([PIECE_VALUES[kind] for kind in PieceKind], dtype=np.int32)


def material_balance(board: Board) -> int:
    """
    White material minus Black material.

    Args:
        board: Position to score

    Returns:
        int: Material balance, without jitter
    """
    values = VALUE_TABLE[board.kinds]
    return int(values[board.white].sum() - values[~board.white].sum())


class MaterialEvaluator(Evaluator):
    """
    Material count with position-keyed jitter.

    Attributes:
        rng: Random source the salt was drawn from
        jitter: Maximum absolute jitter (0 disables it)
        salt: 32-bit value mixed into every position hash
    """

    def __init__(self, rng: Optional[random.Random] = None, jitter: int = 1):
        """
        Initialize the evaluator.

        Args:
            rng: Random source (default: a fresh, unseeded random.Random)
            jitter: Maximum absolute jitter added to each score

        Raises:
            ValueError: If jitter is negative
        """
        if jitter < 0:
            raise ValueError(f"jitter must be non-negative, got {jitter}")
        self.rng = rng if rng is not None else random.Random()
        self.jitter = jitter
        self.salt = self.rng.getrandbits(32)

    def noise(self, board: Board) -> int:
        """Jitter for `board`, in [-jitter, +jitter]."""
        if not self.jitter:
            return 0
        digest = zlib.crc32(board.kinds.tobytes() + board.white.tobytes(), self.salt)
        return digest % (2 * self.jitter + 1) - self.jitter

    def evaluate(self, board: Board) -> int:
        return material_balance(board) + self.noise(board)

    def __repr__(self) -> str:
        return f"MaterialEvaluator(jitter={self.jitter})"
