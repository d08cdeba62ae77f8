import pytest

from gridplace.exceptions import InvalidNetError

from gridplace.layout import Cell

from gridplace.netlist import Net

from gridplace.place.cost import net_wirelength, total_wirelength


def test_net_wirelength():
    cells = [Cell(0, 0, 0), Cell(1, 1, 1)]

    # Half the perimeter of the bounding box
    assert net_wirelength(cells, Net([0, 1])) == 2

    # The net's order doesn't matter
    assert net_wirelength(cells, Net([1, 0])) == 2

    # Moving a cell changes the cost
    cells[1].row = 0
    assert net_wirelength(cells, Net([0, 1])) == 1


def test_net_wirelength_bounding_box():
    cells = [Cell(0, 0, 0), Cell(1, 2, 1), Cell(2, 1, 3), Cell(3, 1, 1)]

    # Columns 0..3, rows 0..2
    assert net_wirelength(cells, Net([0, 1, 2])) == 3 + 2

    # Cells inside the bounding box don't contribute
    assert net_wirelength(cells, Net([0, 1, 2, 3])) == 3 + 2

    # Repeated members are harmless
    assert net_wirelength(cells, Net([1, 1, 3])) == 1


@pytest.mark.parametrize("row,column", [(0, 0), (3, 7), (9, 9)])
def test_singleton_net(row, column):
    cells = [Cell(0, row, column)]
    assert net_wirelength(cells, Net([0])) == 0
    assert total_wirelength(cells, [Net([0]), Net([0])]) == 0


def test_empty_net():
    with pytest.raises(InvalidNetError):
        net_wirelength([Cell(0, 0, 0)], Net([]))


def test_total_wirelength():
    cells = [Cell(0, 0, 0), Cell(1, 1, 1), Cell(2, 0, 3)]
    nets = [Net([0, 1]), Net([1, 2]), Net([2])]

    assert total_wirelength(cells, nets) == 2 + 3 + 0
    assert total_wirelength(cells, []) == 0

    # Evaluating twice gives the same answer
    assert total_wirelength(cells, nets) == total_wirelength(cells, nets)
