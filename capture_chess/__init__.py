"""
capture_chess

A small chess engine for a simplified game: normal piece movement,
automatic queen promotion, and the game ends when a king is captured.
There is no check, castling, en passant or draw detection.

## Architecture

The engine is organized into several key modules:

1. **board**: Board representation
   - 8*8 numpy-backed grid of (PieceKind, color) cells
   - Move application with promotion and king-capture game end
   - ASCII / Unicode rendering and python-chess interop

2. **movegen**: Pseudo-legal move generation
   - One pure function per piece kind
   - Lazy, row-major move sequence per side

3. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: material balance plus seeded random jitter

4. **search**: Search algorithms
   - Minimax with alpha-beta pruning over cloned boards
   - Full-width minimax reference search

5. **cli**: Console game driver
   - Human vs engine, engine vs engine, human vs human

## Quick Start

### As a Python Library

```python
import random
import chess
from capture_chess import api

board = api.new_standard_board()
move = api.best_move(board, depth=3, side_to_move=chess.WHITE, rng=random.Random(7))
board, game_over = api.apply_move(board, move)
print(f"Engine played {move}")
```

### On the Console

```bash
python -m capture_chess.cli 0 3
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from capture_chess.board import Board, Move, MoveError, PieceKind, Square
from capture_chess.evaluation import Evaluator, MaterialEvaluator
from capture_chess.search import SearchResult, alpha_beta, find_best_move

__all__ = [
    'Board',
    'Move',
    'MoveError',
    'PieceKind',
    'Square',
    'Evaluator',
    'MaterialEvaluator',
    'SearchResult',
    'alpha_beta',
    'find_best_move',
]
