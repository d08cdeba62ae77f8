"""A Python implementation of the Simulated Annealing kernel."""

import math

from gridplace.place.cost import total_wirelength

from gridplace.place.sa.kernel import Kernel


class PythonKernel(Kernel):
    """An implementation of the Simulated Annealing placement algorithm kernel
    written in Python.

    The total wirelength of the whole layout is recomputed from scratch after
    every trial move. This is slow for large problems but keeps the cost a
    pure function of the current placement. See
    :py:class:`~gridplace.place.sa.incremental_kernel.IncrementalKernel` for
    a faster kernel which produces identical results.
    """

    def __init__(self, layout, random):
        self.layout = layout.copy()
        self.random = random
        self.cost = total_wirelength(self.layout.cells, self.layout.nets)

    def run_steps(self, num_steps, temperature):
        num_accepted = 0
        for _ in range(num_steps):
            accepted, self.cost = _step(self.layout.cells, self.layout.nets,
                                        self.layout.grid, self.cost,
                                        temperature, self.random)
            num_accepted += 1 if accepted else 0

        return num_accepted, self.cost

    def get_layout(self):
        return self.layout


def _propose_move(cells, grid, random):
    """Select a cell and a new position for it at random.

    Parameters
    ----------
    cells : [:py:class:`~gridplace.layout.Cell`, ...]
    grid : :py:class:`~gridplace.grid.Grid`
    random : :py:class:`random.Random`

    Returns
    -------
    (cell, row, column) or None
        None if the selected position is the cell's current position or is
        occupied by another cell.
    """
    cell = cells[random.randrange(len(cells))]

    # The target is drawn from the whole grid, not the cell's neighbourhood.
    row = random.randrange(grid.rows)
    column = random.randrange(grid.cols)

    if row == cell.row and column == cell.column:
        return None

    # Cells may never share a position, not even while a move is evaluated.
    for other in cells:
        if other.row == row and other.column == column:
            return None

    return (cell, row, column)


def _accept(delta, temperature, random):
    """The Metropolis criterion.

    Improvements are always accepted. Otherwise the move is kept with a
    probability which falls as the cost change grows and the temperature
    drops.
    """
    return delta < 0 or random.random() < math.exp(-delta / temperature)


def _step(cells, nets, grid, cost, temperature, random):
    """Attempt a single trial move: the kernel of the Simulated Annealing
    algorithm.

    Parameters
    ----------
    cells : [:py:class:`~gridplace.layout.Cell`, ...]
        The cells of the layout, updated if the move is accepted.
    nets : [:py:class:`~gridplace.netlist.Net`, ...]
    grid : :py:class:`~gridplace.grid.Grid`
    cost : int
        The total wirelength of the current placement.
    temperature : float > 0.0
        Higher temperatures mean higher chances of accepting a move which
        increases the cost.
    random : :py:class:`random.Random`

    Returns
    -------
    (accepted, cost)
        accepted is a boolean indicating if the move was kept.

        cost is the total wirelength after the move (unchanged when the move
        was not kept).
    """
    move = _propose_move(cells, grid, random)
    if move is None:
        return (False, cost)
    cell, row, column = move

    # Propose
    old_row, old_column = cell.row, cell.column
    cell.row, cell.column = row, column

    # Evaluate
    new_cost = total_wirelength(cells, nets)

    # Commit or roll back
    if _accept(new_cost - cost, temperature, random):
        return (True, new_cost)
    else:
        cell.row, cell.column = old_row, old_column
        return (False, cost)
