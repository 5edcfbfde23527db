"""
Game configuration for the console driver and tools.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import chess


@dataclass
class GameConfig:
    """Configuration for one game.

    Each side is either human (depth 0) or a computer searching a fixed
    number of plies.
    """

    # Players
    white_depth: int = 0
    """Search depth for White (0 = human player)"""

    black_depth: int = 3
    """Search depth for Black (0 = human player)"""

    # Evaluation
    seed: Optional[int] = None
    """Seed for the evaluation jitter (None for a random game)"""

    jitter: int = 1
    """Maximum absolute evaluation jitter (0 disables it)"""

    # Game control
    max_plies: Optional[int] = None
    """Stop after this many plies (None = play until a king falls)"""

    # Display
    unicode: bool = False
    """Render the board with Unicode symbols instead of ASCII"""

    # Logging
    log_file: Optional[Path] = None
    """Write the engine log here (None = no log)"""

    debug: bool = False
    """Log at DEBUG level instead of INFO"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.log_file is not None:
            self.log_file = Path(self.log_file)

        if self.white_depth < 0:
            raise ValueError(f"white_depth must be non-negative, got {self.white_depth}")

        if self.black_depth < 0:
            raise ValueError(f"black_depth must be non-negative, got {self.black_depth}")

        if self.jitter < 0:
            raise ValueError(f"jitter must be non-negative, got {self.jitter}")

        if self.max_plies is not None and self.max_plies <= 0:
            raise ValueError(f"max_plies must be positive, got {self.max_plies}")

    def depth_for(self, color: chess.Color) -> int:
        """Search depth configured for `color`."""
        return self.white_depth if color == chess.WHITE else self.black_depth

    def is_human(self, color: chess.Color) -> bool:
        return self.depth_for(color) == 0

    def __repr__(self) -> str:
        """String representation of config."""

        def describe(depth: int) -> str:
            return "human" if depth == 0 else f"computer (depth {depth})"

        return (
            f"GameConfig(\n"
            f"  White: {describe(self.white_depth)}\n"
            f"  Black: {describe(self.black_depth)}\n"
            f"  Seed: {self.seed}, jitter: {self.jitter}, max plies: {self.max_plies}\n"
            f"  Log: {self.log_file}\n"
            f")"
        )
