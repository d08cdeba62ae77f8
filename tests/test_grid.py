import pytest

from gridplace.grid import Grid


def test_dimensions():
    grid = Grid(2, 3)
    assert grid.rows == 2
    assert grid.cols == 3
    assert len(grid) == 6


@pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2), (0, 0)])
def test_bad_dimensions(rows, cols):
    with pytest.raises(ValueError):
        Grid(rows, cols)


def test_iter():
    # Positions are enumerated in row-major order
    assert list(Grid(2, 3)) == [(0, 0), (0, 1), (0, 2),
                                (1, 0), (1, 1), (1, 2)]


def test_contains():
    grid = Grid(2, 3)
    for position in grid:
        assert position in grid

    assert (2, 0) not in grid
    assert (0, 3) not in grid
    assert (-1, 0) not in grid
    assert (0, -1) not in grid


def test_eq():
    assert Grid(2, 3) == Grid(2, 3)
    assert Grid(2, 3) != Grid(3, 2)
    assert Grid(2, 3) != (2, 3)
    assert hash(Grid(2, 3)) == hash(Grid(2, 3))
