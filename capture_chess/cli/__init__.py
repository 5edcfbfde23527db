"""
Console Interface

This module lets people play the engine (or watch it play itself) in a
terminal.

Protocol Flow:
    Driver → board diagram
    Driver → "White enter your move: "
    Human  → "e2e4"
    Driver → board diagram
    Engine → (searches N plies, moves)
    ...
    Driver → "White won!" / "Black won!"
    Driver → "Game over!"
"""

from capture_chess.cli.interface import GameController, main, parse_move, setup_logger

__all__ = ['GameController', 'main', 'parse_move', 'setup_logger']
