import pytest

from eulerkit.grid import GRID, largest_grid_product


def _transpose(grid):
    return [list(col) for col in zip(*grid)]


def _mirror(grid):
    return [list(reversed(row)) for row in grid]


def test_default_grid_is_twenty_by_twenty_and_used_by_default():
    assert len(GRID) == 20
    assert all(len(row) == 20 for row in GRID)
    assert largest_grid_product(1) == 99
    assert largest_grid_product(4) == largest_grid_product(4, GRID)


def test_four_adjacent_in_default_grid():
    assert largest_grid_product(4) == 70600674


def test_single_cell_is_largest_entry():
    assert largest_grid_product(1) == max(max(row) for row in GRID)


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
def test_transpose_preserves_result(k):
    assert largest_grid_product(k, _transpose(GRID)) == largest_grid_product(k)


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
def test_mirror_preserves_result(k):
    assert largest_grid_product(k, _mirror(GRID)) == largest_grid_product(k)


def test_anti_diagonal_is_found():
    grid = [[0, 0, 5], [0, 5, 0], [5, 0, 0]]
    assert largest_grid_product(3, grid) == 125


def test_diagonal_matches_mirrored_anti_diagonal():
    grid = [[3, 0, 0], [0, 3, 0], [0, 0, 3]]
    assert largest_grid_product(3, grid) == largest_grid_product(3, _mirror(grid))


def test_line_longer_than_grid_gives_zero():
    assert largest_grid_product(21) == 0


def test_empty_grid_gives_zero():
    assert largest_grid_product(2, []) == 0


@pytest.mark.parametrize("k", range(1, 6))
def test_longer_line_never_exceeds_bound(k):
    top = max(max(row) for row in GRID)
    assert largest_grid_product(k + 1) <= top * largest_grid_product(k)


def test_ragged_grid_raises():
    with pytest.raises(ValueError):
        largest_grid_product(2, [[1, 2], [3]])


def test_negative_length_raises():
    with pytest.raises(ValueError):
        largest_grid_product(-1)