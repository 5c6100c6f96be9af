from pathlib import Path

import numpy as np
import pytest

from tictactoe.encode import MoveStatus
from tictactoe.game import Game
from tictactoe.players import Player
from tictactoe.position import Position

TEST_CASES = Path(__file__).parent / "test_cases"


@pytest.fixture
def players():
    return Player("Player"), Player("Opponent")


@pytest.fixture
def game(players):
    return Game(*players)


def play_moves(game, moves):
    """Play (row, col) pairs or tokens for alternating manual players."""
    for move in moves:
        if not isinstance(move, str):
            move = str(Position(move[0], move[1], game.board_size))
        assert game.set_position(move) == MoveStatus.Accepted
        game.update_state()


def seeded_game(first_random=True, second_random=True, board_size=3, seed=0):
    first = Player("First", random=first_random)
    second = Player("Second", random=second_random)
    return Game(first, second, board_size=board_size, rng=np.random.default_rng(seed))
