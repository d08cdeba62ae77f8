import numpy as np

from gridplace.grid import Grid

from gridplace.layout import Cell

from gridplace.render import \
    EMPTY, placement_matrix, format_placement, format_occupancy, clear_lines


CELLS = [Cell(0, 0, 0), Cell(1, 1, 1), Cell(2, 1, 2)]


def test_placement_matrix():
    matrix = placement_matrix(CELLS, Grid(2, 3))
    assert matrix.shape == (2, 3)
    assert np.array_equal(matrix, [[0, EMPTY, EMPTY],
                                   [EMPTY, 1, 2]])


def test_format_placement():
    assert format_placement(CELLS, Grid(2, 3), 2) == (" 0  -  - \n"
                                                      " -  1  2 ")
    assert format_placement(CELLS, Grid(2, 3)).split("\n")[0] == \
        "   0    -    - "


def test_format_placement_wide_ids():
    cells = [Cell(i, 0, i) for i in range(12)]
    assert format_placement(cells, Grid(1, 12), 2).split() == \
        [str(i) for i in range(12)]


def test_format_occupancy():
    assert format_occupancy(CELLS, Grid(2, 3), 1) == ("1 0 0 \n"
                                                      "0 1 1 ")


def test_clear_lines():
    assert clear_lines(0) == ""
    assert clear_lines(2) == "\033[1A\033[2K\033[1A\033[2K"
