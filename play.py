"""Play Tic-Tac-Toe on an N x N board from the terminal.

Moves are typed as column letter and row digit, e.g. A1 or C3.
"""
import argparse
import logging
import sys

import numpy as np

from tictactoe import config
from tictactoe.game import Game
from tictactoe.judger import Judger, tokens
from tictactoe.players import Player

LOG_FORMAT = '[%(levelname)s][%(filename)s:%(lineno)s][%(asctime)s] %(message)s'
DATE_FORMAT = '%Y:%m:%d, %H:%M'


def init_logger(level: str = "WARNING", filename: str = None) -> None:
    """Log to stderr, and to filename as well when given."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if filename:
        handlers.append(logging.FileHandler(filename, encoding="utf-8"))
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True,
    )


def make_players(args):
    """Return (first, second) players for the chosen mode."""
    if args.watch:
        return Player(f"{config.COMPUTER_NAME} 1", random=True), \
            Player(f"{config.COMPUTER_NAME} 2", random=True)

    human = Player(args.name, random=False)
    if args.opponent == "human":
        return human, Player(args.second_name, random=False)

    computer = Player(config.COMPUTER_NAME, random=True)
    if args.computer_first:
        return computer, human
    return human, computer


def play_game(args) -> int:
    first, second = make_players(args)
    game = Game(first, second, board_size=args.size, rng=np.random.default_rng(args.seed))

    if args.moves:
        with open(args.moves, encoding="utf-8") as f:
            return run(Judger(game, tokens(f)))
    return run(Judger(game))


def run(judger: Judger) -> int:
    try:
        judger.play()
    except KeyboardInterrupt:
        print("\nGame interrupted by user.")
        return 1
    except EOFError as e:
        print(f"\n{e}.")
        return 1
    return 0


def main(argv=None):
    ap = argparse.ArgumentParser(
        description="Play Tic-Tac-Toe on an N x N board",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        epilog="Examples:\n"
               "  python play.py --size 4\n"
               "  python play.py --opponent human --name Alice --second-name Bob\n"
               "  python play.py --watch --seed 7\n",
    )

    # Board configuration
    ap.add_argument("--size", type=int, default=config.BOARD_SIZE,
                    help=f"Board size N ({config.MIN_BOARD_SIZE}-{config.MAX_BOARD_SIZE})")

    # Players
    ap.add_argument("--name", type=str, default=config.PLAYER_NAME,
                    help="Name of the (first) human player")
    ap.add_argument("--second-name", type=str, default=f"{config.PLAYER_NAME} 2",
                    help="Name of the second human player (--opponent human)")
    ap.add_argument("--opponent", type=str, default="computer",
                    choices=["computer", "human"],
                    help="Who plays against you")
    ap.add_argument("--computer-first", action="store_true",
                    help="Let the computer make the first move")
    ap.add_argument("--watch", action="store_true",
                    help="Two computers play each other")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for the computer's random moves")

    # Input / logging
    ap.add_argument("--moves", type=str, default=None,
                    help="Read moves from this file instead of stdin")
    ap.add_argument("--log-level", type=str, default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="Logging level")
    ap.add_argument("--log-file", type=str, default=None,
                    help="Also write logs to this file")

    args = ap.parse_args(argv)

    try:
        args.size = config.validate_board_size(args.size)
    except ValueError as e:
        ap.error(str(e))

    init_logger(args.log_level, args.log_file)
    return play_game(args)


if __name__ == "__main__":
    sys.exit(main())
