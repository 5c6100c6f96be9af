"""Shared game referee/loop."""
from __future__ import annotations

import logging
import sys
from typing import Iterable, Iterator, Optional, TextIO

from tictactoe import config
from tictactoe.encode import MoveStatus
from tictactoe.game import Game
from tictactoe.players import Player

logger = logging.getLogger(__name__)

OCCUPIED_MESSAGE = "\nThe space entered is already taken.\n"
INVALID_MESSAGE = "\nInvalid Input: Please enter the column and row of your move (Example: A1).\n"


def tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens from a text stream, line by line."""
    for line in stream:
        yield from line.split()


class Judger:
    def __init__(self, game: Game, moves: Optional[Iterable[str]] = None):
        self.game = game
        self.moves = iter(moves) if moves is not None else tokens(sys.stdin)

    def next_token(self) -> str:
        token = next(self.moves, None)
        if token is None:
            raise EOFError("Input ended before the game was over")
        if token.lower() in config.QUIT_WORDS:
            raise KeyboardInterrupt
        return token

    def play_turn(self):
        """Prompt the current player until one move is accepted."""
        game = self.game
        player = game.current_player
        while True:
            print(f"{player.name} Move ({player.mark}): ", end="")
            if player.random:
                game.set_position()
                print(game.last_position)
                return
            token = self.next_token()
            status = game.set_position(token)
            if status == MoveStatus.Accepted:
                return
            if status == MoveStatus.Occupied:
                print(OCCUPIED_MESSAGE)
            else:
                print(INVALID_MESSAGE)

    def play(self, print_state: bool = True) -> Optional[Player]:
        game = self.game
        logger.info("Game start: %s (%s) vs %s (%s) on %dx%d",
                    game.first_player.name, game.first_player.mark,
                    game.second_player.name, game.second_player.mark,
                    game.board_size, game.board_size)
        if print_state:
            print(game.instructions(), end="")

        while not game.is_terminated:
            if print_state:
                game.print()
            self.play_turn()
            game.update_state()

        if print_state:
            game.print()
        print(game.result_message())
        return game.winner
