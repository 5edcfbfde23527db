"""
Evaluation Module

This module provides position evaluation functions for the engine.
Evaluators are SWAPPABLE: the search works with any evaluator that
implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Material balance plus seeded random jitter

Data Flow:
    Board → evaluator.evaluate() → int
                                   Positive = White advantage
                                   Negative = Black advantage
"""

from capture_chess.evaluation.base import INFINITY, Evaluator
from capture_chess.evaluation.material import (
    PIECE_VALUES,
    MaterialEvaluator,
    material_balance,
)

__all__ = ['INFINITY', 'Evaluator', 'PIECE_VALUES', 'MaterialEvaluator', 'material_balance']
