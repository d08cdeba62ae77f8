import pytest

from gridplace.exceptions import \
    InvalidInstanceError, InsufficientCapacityError, \
    DegenerateInstanceError, InvalidNetError

from gridplace.grid import Grid

from gridplace.layout import Cell, Layout, validate_problem

from gridplace.netlist import Net


@pytest.fixture
def layout():
    return Layout(Grid(2, 2),
                  [Cell(0, 0, 0), Cell(1, 1, 1), Cell(2, 0, 1)],
                  [Net([0, 1]), Net([1, 2])])


class TestCell(object):
    def test_position(self):
        cell = Cell(3, 1, 2)
        assert cell.id == 3
        assert cell.position == (1, 2)

        cell.row = 0
        assert cell.position == (0, 2)

    def test_copy(self):
        cell = Cell(3, 1, 2)
        copy = cell.copy()
        assert copy is not cell
        assert copy == cell

        copy.column = 0
        assert cell.column == 2
        assert copy != cell


class TestLayout(object):
    def test_copy(self, layout):
        copy = layout.copy()

        # The grid and nets are shared, cells are not.
        assert copy.grid is layout.grid
        assert copy.nets == layout.nets
        assert copy.cells == layout.cells
        assert all(a is not b for a, b in zip(copy.cells, layout.cells))

        copy.cells[0].row = 1
        copy.cells[0].column = 0
        assert layout.cells[0].position == (0, 0)

    def test_positions(self, layout):
        assert layout.positions() == {0: (0, 0), 1: (1, 1), 2: (0, 1)}

    def test_occupant(self, layout):
        assert layout.occupant(0, 0) == 0
        assert layout.occupant(1, 1) == 1
        assert layout.occupant(0, 1) == 2
        assert layout.occupant(1, 0) is None

    def test_is_legal(self, layout):
        assert layout.is_legal()

        # Overlapping cells
        layout.cells[2].row = 1
        layout.cells[2].column = 1
        assert not layout.is_legal()

        # Outside the grid
        layout.cells[2].row = 2
        assert not layout.is_legal()

    def test_validate(self, layout):
        layout.validate()

    def test_validate_overlap(self, layout):
        layout.cells[0].column = 1
        with pytest.raises(InvalidInstanceError):
            layout.validate()

    def test_validate_out_of_grid(self, layout):
        layout.cells[0].column = 5
        with pytest.raises(InvalidInstanceError):
            layout.validate()

    def test_validate_bad_ids(self, layout):
        layout.cells[0].id = 7
        with pytest.raises(InvalidInstanceError):
            layout.validate()


@pytest.mark.parametrize("grid,num_cells,nets,exception",
                         [(Grid(2, 2), 5, [Net([0])],
                           InsufficientCapacityError),
                          (Grid(2, 2), 0, [Net([0])],
                           InvalidInstanceError),
                          (Grid(2, 2), 2, [],
                           DegenerateInstanceError),
                          (Grid(2, 2), 2, [Net([0, 1]), Net([])],
                           InvalidNetError),
                          (Grid(2, 2), 2, [Net([0, 2])],
                           InvalidInstanceError),
                          (Grid(2, 2), 2, [Net([-1])],
                           InvalidInstanceError)])
def test_validate_problem(grid, num_cells, nets, exception):
    with pytest.raises(exception):
        validate_problem(grid, num_cells, nets)


def test_validate_problem_ok():
    # Full grids and singleton nets are fine
    validate_problem(Grid(2, 2), 4, [Net([0]), Net([1, 2, 3])])


def test_exception_hierarchy():
    # All problems with an instance can be caught together
    for exception in (InsufficientCapacityError, DegenerateInstanceError,
                      InvalidNetError):
        assert issubclass(exception, InvalidInstanceError)
