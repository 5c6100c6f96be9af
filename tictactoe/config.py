"""Configuration for board dimensions, coordinates and player defaults.
Defaults can be overridden via CLI and are passed into the Game explicitly.
"""

BOARD_SIZE = 3
# Row tokens are single digits, so '1'..'9' bound the board.
MIN_BOARD_SIZE = 1
MAX_BOARD_SIZE = 9

FIRST_COLUMN = 'A'
FIRST_ROW = '1'

PLAYER_NAME = "Player"
COMPUTER_NAME = "Computer"

QUIT_WORDS = {"q", "quit", "exit"}


def validate_board_size(size) -> int:
    """Return the board size as int, or raise ValueError when out of range."""
    size = int(size)
    if size < MIN_BOARD_SIZE or size > MAX_BOARD_SIZE:
        raise ValueError(
            f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {size}")
    return size
