from enum import IntEnum


class Cell(IntEnum):
    Empty = 0
    O = -1
    X = +1

    def char(self):
        if self == Cell.X:
            return "X"
        if self == Cell.O:
            return "O"
        return " "


class MoveStatus(IntEnum):
    """Outcome of a single attempt to place a move."""
    Accepted = 0
    InvalidInput = 1
    Occupied = 2
