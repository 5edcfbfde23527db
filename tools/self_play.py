#!/usr/bin/env python3
"""
Self-Play Runner

Plays a batch of engine-vs-engine games and reports how often each side
captured the enemy king. Each game uses its own seed (base seed + game
index), so any single game can be replayed with the console driver.

Usage:
    python tools/self_play.py --games 20 --white-depth 3 --black-depth 2
"""

import argparse
import logging
import random
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import chess
from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from capture_chess import api
from capture_chess.movegen.sequence import iter_moves

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Outcome of one self-play game."""

    seed: int
    winner: Optional[chess.Color]
    plies: int
    moves: List[str] = field(default_factory=list)


def play_game(
    white_depth: int,
    black_depth: int,
    seed: int,
    max_plies: int,
) -> GameRecord:
    """
    Play one engine-vs-engine game from the opening position.

    Args:
        white_depth: Search depth for White (>= 1)
        black_depth: Search depth for Black (>= 1)
        seed: Seed for the evaluation jitter
        max_plies: Stop after this many plies without a winner

    Returns:
        GameRecord with the winner (None if unfinished)
    """
    rng = random.Random(seed)
    board = api.new_standard_board()
    record = GameRecord(seed=seed, winner=None, plies=0)

    color = chess.WHITE
    while record.plies < max_plies:
        if next(iter_moves(board, color), None) is None:
            break

        depth = white_depth if color == chess.WHITE else black_depth
        move = api.best_move(board, depth, color, rng)
        board, game_over = api.apply_move(board, move)

        record.plies += 1
        record.moves.append(move.uci())

        if game_over:
            record.winner = color
            break
        color = not color

    logger.debug(
        f"Game seed={seed}: winner={record.winner}, plies={record.plies}, "
        f"moves={' '.join(record.moves)}"
    )
    return record


def run_self_play(
    games: int,
    white_depth: int,
    black_depth: int,
    seed: int = 0,
    max_plies: int = 200,
    progress: bool = True,
) -> List[GameRecord]:
    """Play `games` games with seeds seed, seed + 1, ..."""
    records = []
    for index in tqdm(range(games), desc="Self-play", disable=not progress):
        records.append(play_game(white_depth, black_depth, seed + index, max_plies))
    return records


def main():
    parser = argparse.ArgumentParser(
        description="Play engine-vs-engine games and report results",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--games", type=int, default=10, help="Number of games")
    parser.add_argument("--white-depth", type=int, default=2, help="Search depth for White")
    parser.add_argument("--black-depth", type=int, default=2, help="Search depth for Black")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first game")
    parser.add_argument("--max-plies", type=int, default=200, help="Ply limit per game")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.white_depth < 1 or args.black_depth < 1:
        parser.error("Both depths must be at least 1 for self-play")
    if args.games < 1 or args.max_plies < 1:
        parser.error("--games and --max-plies must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    records = run_self_play(
        args.games, args.white_depth, args.black_depth, args.seed, args.max_plies
    )

    white_wins = sum(1 for r in records if r.winner == chess.WHITE)
    black_wins = sum(1 for r in records if r.winner == chess.BLACK)
    unfinished = len(records) - white_wins - black_wins
    average_plies = sum(r.plies for r in records) / len(records)

    print("=" * 60)
    print(f"SELF-PLAY: White depth {args.white_depth} vs Black depth {args.black_depth}")
    print("=" * 60)
    print(f"Games:      {len(records)}")
    print(f"White wins: {white_wins}")
    print(f"Black wins: {black_wins}")
    print(f"Unfinished: {unfinished}")
    print(f"Avg plies:  {average_plies:.1f}")


if __name__ == "__main__":
    main()
