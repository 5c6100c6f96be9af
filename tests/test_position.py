import numpy as np
import pytest

from tictactoe.encode import Cell
from tictactoe.position import Position


def test_parse_corners_on_3x3():
    assert Position.parse("A1", 3) == Position(0, 0, 3)
    assert Position.parse("C1", 3) == Position(0, 2, 3)
    assert Position.parse("A3", 3) == Position(2, 0, 3)
    assert Position.parse("C3", 3) == Position(2, 2, 3)


def test_parse_keeps_token():
    position = Position.parse("B3", 3)
    assert position.token == "B3"
    assert (position.row, position.col) == (2, 1)


@pytest.mark.parametrize("token", ["", "A", "A11", "A1 ", "D1", "A4", "a1", "1A", "@1", "A0", None])
def test_invalid_tokens_on_3x3(token):
    assert not Position.is_valid_token(token, 3)
    assert Position.parse(token, 3) is None


def test_valid_range_follows_board_size():
    assert Position.parse("D4", 3) is None
    assert Position.parse("D4", 4) == Position(3, 3, 4)
    assert Position.parse("I9", 9) == Position(8, 8, 9)
    assert Position.parse("J1", 9) is None


@pytest.mark.parametrize("board_size", [1, 3, 5, 9])
def test_text_round_trip(board_size):
    for row in range(board_size):
        for col in range(board_size):
            position = Position(row, col, board_size)
            parsed = Position.parse(str(position), board_size)
            assert (parsed.row, parsed.col) == (row, col)


def test_diagonal_predicates():
    assert Position(1, 1, 3).is_diagonal()
    assert Position(1, 1, 3).is_anti_diagonal()
    assert Position(0, 2, 3).is_anti_diagonal()
    assert not Position(0, 2, 3).is_diagonal()
    assert Position(3, 0, 4).is_anti_diagonal()
    assert not Position(1, 0, 4).is_diagonal()
    assert not Position(1, 0, 4).is_anti_diagonal()


def test_random_stays_in_bounds():
    rng = np.random.default_rng(42)
    seen = set()
    for _ in range(500):
        position = Position.random(4, rng)
        assert 0 <= position.row < 4 and 0 <= position.col < 4
        seen.add((position.row, position.col))
    assert len(seen) == 16


def test_random_is_reproducible_with_seed():
    a = [Position.random(5, np.random.default_rng(7)) for _ in range(3)]
    b = [Position.random(5, np.random.default_rng(7)) for _ in range(3)]
    assert a == b


def test_is_available():
    board = np.full((3, 3), Cell.Empty, dtype=int)
    board[1, 2] = Cell.X
    assert Position(0, 0, 3).is_available(board)
    assert not Position(1, 2, 3).is_available(board)
