import pytest

import random

from gridplace.exceptions import InsufficientCapacityError

from gridplace.grid import Grid

from gridplace.place.rand import initial_placement


def assert_valid(cells, grid, num_cells):
    """Make sure a placement is a legal bijection onto grid positions."""
    assert len(cells) == num_cells
    assert [cell.id for cell in cells] == list(range(num_cells))
    positions = set(cell.position for cell in cells)
    assert len(positions) == num_cells
    for position in positions:
        assert position in grid


def test_initial_placement():
    grid = Grid(3, 3)
    for _ in range(20):
        cells = initial_placement(grid, 5)
        assert_valid(cells, grid, 5)


@pytest.mark.parametrize("rows,cols,num_cells",
                         [(1, 1, 1), (2, 3, 6), (4, 1, 2), (5, 5, 0)])
def test_sizes(rows, cols, num_cells):
    grid = Grid(rows, cols)
    assert_valid(initial_placement(grid, num_cells), grid, num_cells)


def test_full_grid():
    # Every position is used when there are as many cells as positions
    grid = Grid(3, 4)
    cells = initial_placement(grid, 12)
    assert set(cell.position for cell in cells) == set(grid)


def test_insufficient_capacity():
    with pytest.raises(InsufficientCapacityError):
        initial_placement(Grid(2, 2), 5)


def test_negative():
    with pytest.raises(ValueError):
        initial_placement(Grid(2, 2), -1)


def test_deterministic():
    grid = Grid(4, 4)
    a = initial_placement(grid, 10, random.Random(1))
    b = initial_placement(grid, 10, random.Random(1))
    assert a == b


def test_uses_whole_grid():
    # Over many placements a cell should visit every position
    grid = Grid(3, 3)
    r = random.Random(0)
    seen = set()
    for _ in range(300):
        seen.add(initial_placement(grid, 2, r)[0].position)
    assert seen == set(grid)
