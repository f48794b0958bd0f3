"""Square matrix transforms.

Every transform returns a new array and leaves its input untouched.

    rotate_left  = transpose, then reverse_cols
    rotate_right = transpose, then reverse_rows
"""
from typing import Callable

import numpy as np

Transform = Callable[[np.ndarray], np.ndarray]


def transpose(grid: np.ndarray) -> np.ndarray:
    """Swap elements across the main diagonal."""
    return grid.T.copy()


def reverse_rows(grid: np.ndarray) -> np.ndarray:
    """Mirror every row left to right."""
    return grid[:, ::-1].copy()


def reverse_cols(grid: np.ndarray) -> np.ndarray:
    """Mirror every column top to bottom."""
    return grid[::-1, :].copy()


def rotate_left(grid: np.ndarray) -> np.ndarray:
    """Rotate a quarter turn counter-clockwise."""
    return reverse_cols(transpose(grid))


def rotate_right(grid: np.ndarray) -> np.ndarray:
    """Rotate a quarter turn clockwise."""
    return reverse_rows(transpose(grid))


def identity(grid: np.ndarray) -> np.ndarray:
    return grid.copy()


def index_map(transform: Transform, size: int) -> np.ndarray:
    """
    Track where every cell goes under a transform.

    Args:
        transform: One of the transforms in this module
        size: Side length N of the square grid

    Returns:
        N x N array; entry (r, c) is the flat index (row * N + col) of the
        cell that the transform moved to (r, c).
    """
    return transform(np.arange(size * size).reshape(size, size))
