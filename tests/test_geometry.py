"""Tests for square matrix transforms."""
import numpy as np
import pytest

from gazool.fields.geometry import (
    identity,
    index_map,
    reverse_cols,
    reverse_rows,
    rotate_left,
    rotate_right,
    transpose,
)


@pytest.fixture(params=[2, 3, 4, 5])
def grid(request) -> np.ndarray:
    size = request.param
    return np.arange(1, size * size + 1, dtype=np.int32).reshape(size, size)


class TestTransforms:
    """Test the individual transforms."""

    def test_transpose(self):
        """Transpose swaps rows and columns."""
        grid = np.array([[1, 2], [3, 4]])
        assert np.array_equal(transpose(grid), [[1, 3], [2, 4]])

    def test_reverse_rows(self):
        """Every row is mirrored left to right."""
        grid = np.array([[1, 2, 3], [4, 5, 6]])
        assert np.array_equal(reverse_rows(grid), [[3, 2, 1], [6, 5, 4]])

    def test_reverse_cols(self):
        """Row order is mirrored top to bottom."""
        grid = np.array([[1, 2], [3, 4], [5, 6]])
        assert np.array_equal(reverse_cols(grid), [[5, 6], [3, 4], [1, 2]])

    def test_rotate_left_is_counter_clockwise(self, grid):
        """rotate_left is a counter-clockwise quarter turn."""
        assert np.array_equal(rotate_left(grid), np.rot90(grid, 1))

    def test_rotate_right_is_clockwise(self, grid):
        """rotate_right is a clockwise quarter turn."""
        assert np.array_equal(rotate_right(grid), np.rot90(grid, -1))

    def test_inputs_are_not_mutated(self, grid):
        """Transforms return new arrays."""
        original = grid.copy()
        for transform in (transpose, reverse_rows, reverse_cols, rotate_left, rotate_right, identity):
            result = transform(grid)
            result[0, 0] = -1
            assert np.array_equal(grid, original)


class TestRotationLaws:
    """Test the identities the shift engine relies on."""

    def test_left_then_right_is_identity(self, grid):
        assert np.array_equal(rotate_right(rotate_left(grid)), grid)

    def test_right_then_left_is_identity(self, grid):
        assert np.array_equal(rotate_left(rotate_right(grid)), grid)

    def test_four_left_rotations_are_identity(self, grid):
        result = grid
        for _ in range(4):
            result = rotate_left(result)
        assert np.array_equal(result, grid)

    def test_four_right_rotations_are_identity(self, grid):
        result = grid
        for _ in range(4):
            result = rotate_right(result)
        assert np.array_equal(result, grid)

    def test_mirrors_are_involutions(self, grid):
        """Mirroring twice, or transposing twice, gives the input back."""
        assert np.array_equal(reverse_rows(reverse_rows(grid)), grid)
        assert np.array_equal(reverse_cols(reverse_cols(grid)), grid)
        assert np.array_equal(transpose(transpose(grid)), grid)


class TestIndexMap:
    """Test cell tracking through transforms."""

    def test_identity(self):
        assert np.array_equal(index_map(identity, 4), np.arange(16).reshape(4, 4))

    def test_rotate_right_sources(self):
        """After a clockwise turn, the top-left cell came from the bottom-left."""
        cells = index_map(rotate_right, 4)
        assert divmod(int(cells[0, 0]), 4) == (3, 0)
        assert divmod(int(cells[0, 3]), 4) == (0, 0)

    def test_rotate_left_sources(self):
        """After a counter-clockwise turn, the top-left cell came from the top-right."""
        cells = index_map(rotate_left, 4)
        assert divmod(int(cells[0, 0]), 4) == (0, 3)
        assert divmod(int(cells[3, 0]), 4) == (0, 0)

    def test_map_agrees_with_values(self, grid):
        """Looking a mapped index up in the input gives the transformed value."""
        size = grid.shape[0]
        for transform in (transpose, reverse_rows, reverse_cols, rotate_left, rotate_right):
            cells = index_map(transform, size)
            moved = transform(grid)
            assert np.array_equal(grid.ravel()[cells], moved)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
