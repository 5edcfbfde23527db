"""
Main entry point for running the console game.

Usage:
    python -m capture_chess.cli 0 5
"""

import sys

from capture_chess.cli.interface import main

if __name__ == "__main__":
    sys.exit(main())
