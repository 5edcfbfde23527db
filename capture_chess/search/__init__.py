"""
Search Module

This module implements the engine's search algorithms. The primary
algorithm is depth-bounded minimax with alpha-beta pruning over cloned
boards; a full-width minimax is kept alongside it as a reference.

Key Components:
    - alpha_beta: Core search algorithm with alpha-beta pruning
    - find_best_move: Root-level search returning the chosen move
    - minimax: Unpruned reference search (same tie-break)
    - SearchResult: (score, move) returned by every frame
    - SearchStats: Optional node / cutoff counters
"""

from capture_chess.search.alphabeta import alpha_beta, find_best_move
from capture_chess.search.minimax import minimax
from capture_chess.search.node import SearchInvariantError, SearchResult, SearchStats

__all__ = [
    'alpha_beta',
    'find_best_move',
    'minimax',
    'SearchInvariantError',
    'SearchResult',
    'SearchStats',
]
