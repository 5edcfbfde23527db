"""
Console Game Driver

This module runs a game between two players on the console. Each side is
either a human typing moves or the engine searching a fixed depth.

Usage:
    python -m capture_chess.cli WHITE_DEPTH BLACK_DEPTH [options]

    A depth of 0 makes that side human-controlled. "0 5" pits a human
    (White) against an engine searching 5 plies (Black).

Human Input:
    - Four characters, source then destination: "b1c3" moves the piece on
      B1 to C3
    - "q" quits immediately
    - Invalid input is reported and the player is asked again

Game Flow:
    White moves, Black moves, ... until a king is captured ("White won!" /
    "Black won!"), a side has no moves, the optional ply limit is reached,
    or a human quits.

Two engines with the same depth may shuffle pieces back and forth for a
long time because the simplified rules have no draw detection; use
--max-plies to bound such games.
"""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

import chess

from capture_chess import api
from capture_chess.board.representation import render_board, render_unicode
from capture_chess.board.state import Board, Move
from capture_chess.config import GameConfig
from capture_chess.movegen.sequence import iter_moves

logger = logging.getLogger(__name__)

QUIT_COMMAND = "q"
MOVE_FORMAT_HINT = (
    'Move format should be 4 characters long and be something like "b1c3" '
    "which would move the piece at grid position B1 to grid position C3."
)


def setup_logger(log_file: Optional[Path] = None, debug: bool = False) -> logging.Logger:
    """
    Setup the package logger for the console driver.

    The console is used for the board display, so log records only go to
    a file. Without a log file they are discarded.

    Args:
        log_file: Destination file (None to discard log records)
        debug: If True, log at DEBUG level; otherwise INFO level

    Returns:
        Configured logger instance
    """
    package_logger = logging.getLogger("capture_chess")
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    package_logger.handlers.clear()

    if log_file is None:
        package_logger.addHandler(logging.NullHandler())
        return package_logger

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)

    return package_logger


def parse_move(text: str) -> Move:
    """
    Parse a 4-character coordinate move such as "b1c3".

    Column letters are case-insensitive.

    Raises:
        ValueError: With a message naming the offending part
    """
    if len(text) != 4:
        raise ValueError("invalid input length")

    parts = (
        ("source column", text[0].lower(), chess.FILE_NAMES),
        ("source row", text[1], chess.RANK_NAMES),
        ("destination column", text[2].lower(), chess.FILE_NAMES),
        ("destination row", text[3], chess.RANK_NAMES),
    )
    coordinates = []
    for label, char, names in parts:
        if char not in names:
            raise ValueError(f"invalid input for {label}")
        coordinates.append(names.index(char))

    return Move(*coordinates)


class GameController:
    """
    Runs one game on the console.

    Attributes:
        config: Game configuration
        board: Current position
        rng: Random source for the engine's evaluation jitter
        plies: Number of moves played so far
        winner: chess.WHITE / chess.BLACK once a king is captured, else None
        quit: True if a human player quit
    """

    def __init__(self, config: GameConfig, board: Optional[Board] = None):
        """
        Initialize the controller.

        Args:
            config: Game configuration
            board: Starting position (default: standard opening)
        """
        self.config = config
        self.board = board if board is not None else api.new_standard_board()
        self.rng = random.Random(config.seed)
        self.plies = 0
        self.winner: Optional[chess.Color] = None
        self.quit = False

    def run(self) -> Optional[chess.Color]:
        """
        Play until the game ends.

        Returns:
            The winning color, or None if nobody captured a king
        """
        logger.info(f"=== New game ===\n{self.config!r}")

        print(f"White depth check is: {self.config.white_depth}")
        print(f"Black depth check is: {self.config.black_depth}")
        if self.config.is_human(chess.WHITE) or self.config.is_human(chess.BLACK):
            print(MOVE_FORMAT_HINT)

        print("Start game")
        self.show_board()

        color = chess.WHITE
        while True:
            if self.config.max_plies is not None and self.plies >= self.config.max_plies:
                print("Ply limit reached.")
                logger.info(f"Ply limit {self.config.max_plies} reached")
                break

            if next(iter_moves(self.board, color), None) is None:
                print(f"{self._name(color)} has no moves.")
                logger.info(f"{self._name(color)} has no moves")
                break

            game_over = self.play_turn(color)
            if self.quit:
                logger.info(f"{self._name(color)} quit after {self.plies} plies")
                return None

            self.show_board()
            print()

            if game_over:
                self.winner = color
                print(f"{self._name(color)} won!")
                logger.info(f"{self._name(color)} won after {self.plies} plies")
                break

            color = not color

        print("Game over!")
        return self.winner

    def play_turn(self, color: chess.Color) -> bool:
        """
        Let `color` make one move.

        Returns:
            bool: True if the move captured a king
        """
        if self.config.is_human(color):
            move = self.handle_human(color)
            if move is None:
                self.quit = True
                return False
        else:
            move = self.handle_computer(color)

        self.board, game_over = api.apply_move(self.board, move)
        self.plies += 1
        logger.info(f"Ply {self.plies}: {self._name(color)} played {move}")
        return game_over

    def handle_human(self, color: chess.Color) -> Optional[Move]:
        """
        Read moves from stdin until a valid one is entered.

        Returns:
            The validated Move, or None if the player quits (or stdin ends)
        """
        print(f"{self._name(color)} enter your move: ")
        while True:
            try:
                text = input().strip()
            except EOFError:
                logger.info("EOF received, treating as quit")
                return None

            if text == QUIT_COMMAND:
                return None

            try:
                move = parse_move(text)
            except ValueError as e:
                print(e)
                logger.warning(f"Rejected input {text!r}: {e}")
                continue

            if not self._owns(color, move) or not api.is_valid_move(
                self.board, move.src_col, move.src_row, move.dest_col, move.dest_row
            ):
                print("invalid move")
                logger.warning(f"Rejected move {move} for {self._name(color)}")
                continue

            return move

    def handle_computer(self, color: chess.Color) -> Move:
        """Search the configured depth and return the engine's move."""
        depth = self.config.depth_for(color)
        logger.debug(f"{self._name(color)} searching depth {depth}")
        return api.best_move(self.board, depth, color, self.rng, jitter=self.config.jitter)

    def show_board(self):
        """Print the current position."""
        if self.config.unicode:
            print(render_unicode(self.board))
        else:
            print(render_board(self.board))

    def _owns(self, color: chess.Color, move: Move) -> bool:
        kind, piece_color = self.board.get(move.src_col, move.src_row)
        return bool(kind) and piece_color == color

    @staticmethod
    def _name(color: chess.Color) -> str:
        return chess.COLOR_NAMES[color].capitalize()


def build_parser() -> argparse.ArgumentParser:
    """Command-line parser for the console driver."""
    parser = argparse.ArgumentParser(
        prog="capture_chess",
        description="Play simplified chess (capture the king to win) on the console.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "white_depth",
        type=int,
        help="Search depth for White (0 = human player)",
    )
    parser.add_argument(
        "black_depth",
        type=int,
        help="Search depth for Black (0 = human player)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the evaluation jitter",
    )
    parser.add_argument(
        "--max-plies",
        type=int,
        default=None,
        help="Stop the game after this many plies",
    )
    parser.add_argument(
        "--unicode",
        action="store_true",
        help="Render the board with Unicode chess symbols",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write the engine log to this file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Console entry point.

    Returns:
        Process exit code (argument errors exit with status 2 via argparse)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = GameConfig(
            white_depth=args.white_depth,
            black_depth=args.black_depth,
            seed=args.seed,
            max_plies=args.max_plies,
            unicode=args.unicode,
            log_file=args.log_file,
            debug=args.verbose,
        )
    except ValueError as e:
        parser.error(str(e))

    setup_logger(config.log_file, debug=config.debug)
    GameController(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
