"""Board coordinates and their two-character textual form.

A token is the column letter followed by the row digit, so on a 3x3 board
"A1" is the top-left cell (row 0, col 0) and "C3" the bottom-right one.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from tictactoe import config
from tictactoe.encode import Cell


@dataclass(frozen=True)
class Position:
    row: int
    col: int
    board_size: int = config.BOARD_SIZE
    # Text typed by the user, kept for echoing back
    token: Optional[str] = field(default=None, compare=False)

    @staticmethod
    def is_valid_token(token: str, board_size: int) -> bool:
        """True if the token names a cell of a board_size x board_size board.

        Wrong length, a letter outside the column range and a digit outside
        the row range are all reported the same way.
        """
        if not isinstance(token, str) or len(token) != 2:
            return False
        letter, digit = token[0], token[1]
        first_col, first_row = ord(config.FIRST_COLUMN), ord(config.FIRST_ROW)
        return (first_col <= ord(letter) <= first_col + board_size - 1
                and first_row <= ord(digit) <= first_row + board_size - 1)

    @classmethod
    def parse(cls, token: str, board_size: int) -> Optional[Position]:
        """Position named by token, or None if the token is not valid."""
        if not cls.is_valid_token(token, board_size):
            return None
        row = ord(token[1]) - ord(config.FIRST_ROW)
        col = ord(token[0]) - ord(config.FIRST_COLUMN)
        return cls(row, col, board_size, token)

    @classmethod
    def random(cls, board_size: int, rng: np.random.Generator) -> Position:
        row = int(rng.integers(board_size))
        col = int(rng.integers(board_size))
        return cls(row, col, board_size)

    def is_available(self, board: np.ndarray) -> bool:
        return board[self.row, self.col] == Cell.Empty

    def is_diagonal(self) -> bool:
        return self.row == self.col

    def is_anti_diagonal(self) -> bool:
        return self.row + self.col == self.board_size - 1

    def __str__(self):
        col_char = chr(self.col + ord(config.FIRST_COLUMN))
        row_char = chr(self.row + ord(config.FIRST_ROW))
        return col_char + row_char
