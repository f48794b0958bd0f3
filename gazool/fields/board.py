"""Board constants and rules that do not depend on a shift direction."""
import random

import numpy as np

NUM_ROWS = 4
NUM_COLUMNS = 4
NUM_SQUARES = NUM_ROWS * NUM_COLUMNS

# Footprint of one tile on the console, and the gap between tiles
TILE_HEIGHT = 5
TILE_WIDTH = 11
ROW_PITCH = TILE_HEIGHT + 1
COL_PITCH = TILE_WIDTH + 1


def display_row(row: int) -> int:
    """Map a grid row to the console row of the tile's top edge."""
    return row * ROW_PITCH + 1


def display_col(col: int) -> int:
    """Map a grid column to the console column of the tile's left edge."""
    return col * COL_PITCH + 1


def new_board() -> np.ndarray:
    return np.zeros((NUM_ROWS, NUM_COLUMNS), dtype=np.int32)


def get_empty_cells(board: np.ndarray) -> list[tuple[int, int]]:
    """Get list of empty cell coordinates, in row-major order."""
    return [(int(r), int(c)) for r, c in zip(*np.where(board == 0))]


def add_random_tile(board: np.ndarray, rng: random.Random | None = None) -> bool:
    """
    Place a 2 or a 4 (even odds) on a uniformly chosen empty cell.

    Args:
        board: Board to modify in place
        rng: Random source; the module-level generator when omitted

    Returns:
        False when the board is full and nothing was placed
    """
    rng = rng or random
    empty_cells = get_empty_cells(board)
    if not empty_cells:
        return False
    row, col = rng.choice(empty_cells)
    board[row, col] = 2 if rng.random() < 0.5 else 4
    return True


def is_game_won(board: np.ndarray, winning_tile: int) -> bool:
    """Return whether the winning tile is present anywhere on the board."""
    return bool(np.any(board == winning_tile))


def can_move(board: np.ndarray, row: int, col: int) -> bool:
    """
    Check if the tile at (row, col) could move.

    A tile can move when one of its four neighbours is empty or holds the
    same value. Empty cells never move.
    """
    value = board[row, col]
    if value == 0:
        return False

    rows, cols = board.shape
    for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
        if 0 <= r < rows and 0 <= c < cols:
            other = board[r, c]
            if other == 0 or other == value:
                return True
    return False


def is_game_lost(board: np.ndarray) -> bool:
    """Check if no more moves are possible."""
    if 0 in board:
        return False

    rows, cols = board.shape
    for i in range(rows):
        for j in range(cols):
            if can_move(board, i, j):
                return False
    return True


def get_max_tile(board: np.ndarray) -> int:
    """Return the maximum tile value on the board."""
    return int(np.max(board))
