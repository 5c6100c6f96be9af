from tictactoe.encode import Cell, MoveStatus
from tictactoe.game import Game, GameOverError
from tictactoe.judger import Judger, tokens
from tictactoe.players import Player
from tictactoe.position import Position

__all__ = [
    "Cell", "MoveStatus", "Game", "GameOverError",
    "Judger", "tokens", "Player", "Position",
]
