"""Game state for Tic-Tac-Toe on an N x N board.

A move is accepted with `set_position` and then `update_state` looks for a
completed line through the last position, or a full board.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from tictactoe import config
from tictactoe.encode import Cell, MoveStatus
from tictactoe.players import Player
from tictactoe.position import Position

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """A move was requested after the game ended."""


class Game:
    def __init__(self, first_player: Player, second_player: Player,
                 board_size: int = config.BOARD_SIZE,
                 rng: Optional[np.random.Generator] = None):
        self.board_size = config.validate_board_size(board_size)
        self.board = np.full((self.board_size, self.board_size), Cell.Empty, dtype=int)
        self.rng = rng if rng is not None else np.random.default_rng()

        self.first_player = first_player
        self.second_player = second_player
        self.current_player = first_player
        self.last_position: Optional[Position] = None
        self.winner: Optional[Player] = None
        self.is_terminated = False

        self.first_player.setSymbol(Cell.X)
        self.second_player.setSymbol(Cell.O)

    def cell(self, row: int, col: int) -> Cell:
        return Cell(self.board[row, col])

    @property
    def last_player(self) -> Player:
        """The player who made the last move."""
        return self.other(self.current_player)

    def other(self, player: Player) -> Player:
        return self.second_player if player is self.first_player else self.first_player

    # -----------------------------
    # MOVES
    # -----------------------------
    def set_position(self, token: Optional[str] = None) -> MoveStatus:
        """Try to place a move for the current player.

        Random players draw cells until an empty one turns up and ignore the
        token. For manual players the token is parsed; a malformed token or an
        occupied cell is reported and nothing changes, so the caller should ask
        for another token.
        """
        if self.is_terminated:
            raise GameOverError("The game is over, no more moves are accepted")

        if self.current_player.random:
            while True:
                position = Position.random(self.board_size, self.rng)
                if position.is_available(self.board):
                    break
        else:
            position = Position.parse(token, self.board_size)
            if position is None:
                logger.debug("Rejected %r from %s: invalid input", token, self.current_player.name)
                return MoveStatus.InvalidInput
            if not position.is_available(self.board):
                logger.debug("Rejected %s from %s: occupied", position, self.current_player.name)
                return MoveStatus.Occupied

        self.execTurn(position)
        return MoveStatus.Accepted

    def execTurn(self, position: Position):
        logger.debug("%s (%s) plays %s", self.current_player.name,
                     self.current_player.mark, position)
        self.board[position.row, position.col] = self.current_player.symbol
        self.last_position = position
        self.current_player = self.other(self.current_player)

    # -----------------------------
    # STATE EVALUATION
    # -----------------------------
    def update_state(self):
        """Check the lines through the last position, then the tie."""
        if self.traverse_row():
            return
        if self.traverse_col():
            return
        if self.last_position.is_diagonal() and self.traverse_diag():
            return
        if self.last_position.is_anti_diagonal() and self.traverse_anti_diag():
            return
        self.is_tie()

    def traverse_row(self) -> bool:
        if self.last_position is None:
            return False
        return self._check_line(self.board[self.last_position.row, :])

    def traverse_col(self) -> bool:
        if self.last_position is None:
            return False
        return self._check_line(self.board[:, self.last_position.col])

    def traverse_diag(self) -> bool:
        return self._check_line(self.board.diagonal())

    def traverse_anti_diag(self) -> bool:
        # (0, N-1) down to (N-1, 0)
        return self._check_line(np.fliplr(self.board).diagonal())

    def _check_line(self, line: np.ndarray) -> bool:
        symbol = line[0]
        if symbol == Cell.Empty:
            return False
        if not np.all(line == symbol):
            return False
        self._set_winner()
        return True

    def _set_winner(self):
        self.winner = self.last_player
        self.is_terminated = True
        logger.info("%s (%s) wins", self.winner.name, self.winner.mark)

    def is_tie(self) -> bool:
        """True when no empty cell is left; ends the game."""
        if np.any(self.board == Cell.Empty):
            return False
        self.is_terminated = True
        if self.winner is None:
            logger.info("Game ended in a tie")
        return True

    # -----------------------------
    # DISPLAY
    # -----------------------------
    @staticmethod
    def _sequence(first_char, count, sep):
        return sep.join(chr(ord(first_char) + i) for i in range(count))

    def _choices(self, first_char):
        chars = [chr(ord(first_char) + i) for i in range(self.board_size)]
        if len(chars) == 1:
            return chars[0]
        return ", ".join(chars[:-1]) + ", or " + chars[-1]

    def instructions(self) -> str:
        return ("************\n"
                "Tic-Tac-Toe!\n"
                "************\n"
                "\n"
                f"Please enter the column ({self._choices(config.FIRST_COLUMN)}) "
                f"and then the row ({self._choices(config.FIRST_ROW)}) of your move.\n")

    def render(self) -> str:
        lines = ["", "   " + self._sequence(config.FIRST_COLUMN, self.board_size, " ")]
        for row in range(self.board_size):
            cells = "".join(self.cell(row, col).char() + "|" for col in range(self.board_size))
            lines.append(f"{row + 1} |{cells}")
        lines.append("")
        return "\n".join(lines) + "\n"

    def print(self):
        print(self.render(), end="")

    def result_message(self) -> str:
        if self.winner is not None:
            return f"{self.winner.name} wins!"
        return "Tie!"
