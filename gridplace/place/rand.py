"""Random initial placement."""

# This is renamed to ensure that the random module isn't accidentally used
# directly.
import random as default_random

from gridplace.exceptions import InsufficientCapacityError

from gridplace.layout import Cell


def initial_placement(grid, num_cells, random=default_random):
    """Produce a uniformly random legal placement.

    Every position in the grid is shuffled and the first ``num_cells``
    positions are given, in order, to cells ``0`` to ``num_cells - 1``. Every
    arrangement is equally likely.

    Parameters
    ----------
    grid : :py:class:`~gridplace.grid.Grid`
    num_cells : int
    random : :py:class:`random.Random`
        Defaults to ``import random`` but can be set to your own instance of
        :py:class:`random.Random` to control the seed and produce
        deterministic results.

    Returns
    -------
    [:py:class:`~gridplace.layout.Cell`, ...]
        Cells on pairwise-distinct positions, indexed by id.

    Raises
    ------
    InsufficientCapacityError
        If there are more cells than positions in the grid.
    """
    if num_cells < 0:
        raise ValueError(
            "Number of cells must not be negative, not {}".format(num_cells))
    if num_cells > len(grid):
        raise InsufficientCapacityError(
            "Cannot place {} cells on {}".format(num_cells, grid))

    positions = list(grid)
    random.shuffle(positions)

    return [Cell(i, row, col)
            for i, (row, col) in enumerate(positions[:num_cells])]
