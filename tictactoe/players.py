"""Participants of a game."""
from __future__ import annotations

from typing import Optional

from tictactoe.encode import Cell


class Player:
    """A named participant. Moves come from input unless random is set."""

    def __init__(self, name: str, random: bool = False) -> None:
        self.name = name
        self.random = random
        self.symbol: Optional[Cell] = None

    def setSymbol(self, symbol: Cell) -> None:
        self.symbol = symbol

    @property
    def mark(self) -> str:
        if self.symbol is None:
            return " "
        return self.symbol.char()

    def __repr__(self):
        kind = "random" if self.random else "manual"
        return f"Player({self.name!r}, {kind}, {self.mark!r})"
