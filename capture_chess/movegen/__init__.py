"""
Move Generation Module

Key Components:
    - destinations: Destination squares for the piece on one square
    - is_valid_move: Check a (source, destination) pair against generation
    - iter_moves: Lazy, ordered sequence of every move for one side
    - legal_moves: The same sequence collected into a list

Data Flow:
    Board + color → iter_moves() → Move, Move, ... (row-major scan order)
"""

from capture_chess.movegen.generator import destinations, is_valid_move
from capture_chess.movegen.sequence import iter_moves, legal_moves

__all__ = ['destinations', 'is_valid_move', 'iter_moves', 'legal_moves']
