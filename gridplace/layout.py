"""The layout model: a grid, the cells placed on it and the nets joining
them.
"""

from gridplace.exceptions import \
    InvalidInstanceError, InsufficientCapacityError, \
    DegenerateInstanceError, InvalidNetError


class Cell(object):
    """A placeable component with a stable id and a mutable position.

    Attributes
    ----------
    id : int
    row : int
    column : int
    """
    __slots__ = ["id", "row", "column"]

    def __init__(self, id, row, column):
        self.id = id
        self.row = row
        self.column = column

    @property
    def position(self):
        """The (row, column) of the cell."""
        return (self.row, self.column)

    def copy(self):
        return Cell(self.id, self.row, self.column)

    def __eq__(self, other):
        return (isinstance(other, Cell) and
                self.id == other.id and
                self.row == other.row and
                self.column == other.column)

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        return "<Cell {} at ({}, {})>".format(self.id, self.row, self.column)


class Layout(object):
    """A placement problem together with its current placement solution.

    The grid and nets are fixed for the lifetime of a layout. The sequence of
    cells is also fixed (the id of the cell at index i is always i) but the
    position of each cell may be changed by a placer.

    Attributes
    ----------
    grid : :py:class:`~gridplace.grid.Grid`
    cells : [:py:class:`Cell`, ...]
    nets : [:py:class:`~gridplace.netlist.Net`, ...]
    """
    __slots__ = ["grid", "cells", "nets"]

    def __init__(self, grid, cells, nets):
        self.grid = grid
        self.cells = list(cells)
        self.nets = list(nets)

    def copy(self):
        """Produce a copy of this layout whose cells may be moved without
        affecting the original. The grid and nets are shared.
        """
        return Layout(self.grid, [c.copy() for c in self.cells], self.nets)

    def positions(self):
        """Get the position of every cell.

        Returns
        -------
        {cell_id: (row, column), ...}
        """
        return {cell.id: cell.position for cell in self.cells}

    def occupant(self, row, column):
        """Get the id of the cell at the given position, or None if the
        position is free.
        """
        for cell in self.cells:
            if cell.row == row and cell.column == column:
                return cell.id
        return None

    def is_legal(self):
        """Is every cell within the grid and on a position of its own?"""
        positions = set()
        for cell in self.cells:
            if cell.position not in self.grid or cell.position in positions:
                return False
            positions.add(cell.position)
        return True

    def validate(self):
        """Check that this layout describes a placeable problem with a legal
        placement.

        Raises
        ------
        DegenerateInstanceError
            If there are no nets.
        InvalidNetError
            If a net references no cells.
        InsufficientCapacityError
            If there are more cells than grid positions.
        InvalidInstanceError
            If a net references an unknown cell, the cell ids are not
            0..n-1 in order or the placement is not legal.
        """
        validate_problem(self.grid, len(self.cells), self.nets)

        for index, cell in enumerate(self.cells):
            if cell.id != index:
                raise InvalidInstanceError(
                    "Cell at index {} has id {}".format(index, cell.id))
            if cell.position not in self.grid:
                raise InvalidInstanceError(
                    "Cell {} at {} lies outside {}".format(
                        cell.id, cell.position, self.grid))

        if not self.is_legal():
            raise InvalidInstanceError(
                "Placement has more than one cell on a position")


def validate_problem(grid, num_cells, nets):
    """Check that a placement problem can be placed and annealed.

    Parameters
    ----------
    grid : :py:class:`~gridplace.grid.Grid`
    num_cells : int
    nets : [:py:class:`~gridplace.netlist.Net`, ...]

    Raises
    ------
    InvalidInstanceError
        (Or one of its subclasses.) See :py:meth:`Layout.validate`.
    """
    if num_cells <= 0:
        raise InvalidInstanceError(
            "At least one cell is required, not {}".format(num_cells))
    if num_cells > len(grid):
        raise InsufficientCapacityError(
            "Cannot place {} cells on {}".format(num_cells, grid))
    if len(nets) == 0:
        raise DegenerateInstanceError("Problem has no nets")
    for net in nets:
        if len(net) == 0:
            raise InvalidNetError("{} references no cells".format(net))
        for cell_id in net:
            if not 0 <= cell_id < num_cells:
                raise InvalidInstanceError(
                    "{} references unknown cell {}".format(net, cell_id))
