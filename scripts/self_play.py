#!/usr/bin/env python3
"""
Play automated games and report who wins.

Usage: python scripts/self_play.py --games 20 --size 4 --red-depth 2 --blue-depth 3
"""

import argparse

from tqdm import tqdm

from chain_reaction.config import GameConfig, configure_logging
from chain_reaction.game.board import Board
from chain_reaction.game.side import Side
from chain_reaction.match import Match
from chain_reaction.players import Automated


def parse_args():
    defaults = GameConfig.from_env()
    parser = argparse.ArgumentParser(description="Automated chain reaction games")
    parser.add_argument('--games', type=int, default=10, help="Number of games to play")
    parser.add_argument('--size', type=int, default=defaults.board_size, help="Board size")
    parser.add_argument('--red-depth', type=int, default=defaults.depth, help="RED search depth")
    parser.add_argument('--blue-depth', type=int, default=defaults.depth, help="BLUE search depth")
    parser.add_argument('--max-moves', type=int, default=500,
                        help="Give up on a game after this many moves")
    parser.add_argument('--show', action='store_true', help="Print the final board of each game")
    parser.add_argument('--log-level', default=defaults.log_level)
    return parser.parse_args()


def main():
    args = parse_args()
    configure_logging(args.log_level)

    results = {Side.RED: 0, Side.BLUE: 0, Side.NONE: 0}
    board = Board(args.size)
    for _ in tqdm(range(args.games), desc="Self-play", ncols=80):
        board.clear(args.size)
        match = Match(board, Automated(args.red_depth), Automated(args.blue_depth))
        winner = match.play(max_moves=args.max_moves)
        results[winner] += 1
        if args.show:
            print()
            print(board)

    print("\n" + "=" * 40)
    print(f"Board {args.size}x{args.size}, depths red={args.red_depth} blue={args.blue_depth}")
    print("=" * 40)
    print(f"Red wins:   {results[Side.RED]}")
    print(f"Blue wins:  {results[Side.BLUE]}")
    print(f"Unfinished: {results[Side.NONE]}")


if __name__ == '__main__':
    main()
