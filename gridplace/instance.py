"""Reading placement problems from text files.

A problem is described by whitespace-separated integers::

    num_cells num_nets num_rows num_cols
    k  cell_1 ... cell_k      <- one line per net
    ...

Line breaks are not significant.
"""

from collections import namedtuple

from gridplace.exceptions import InvalidInstanceError

from gridplace.grid import Grid

from gridplace.layout import validate_problem

from gridplace.netlist import Net


Instance = namedtuple("Instance", "num_cells grid nets")
"""A placement problem.

Attributes
----------
num_cells : int
grid : :py:class:`~gridplace.grid.Grid`
nets : [:py:class:`~gridplace.netlist.Net`, ...]
"""


def _read_int(tokens, what):
    try:
        token = next(tokens)
    except StopIteration:
        raise InvalidInstanceError(
            "Unexpected end of input while reading {}".format(what))
    try:
        return int(token)
    except ValueError:
        raise InvalidInstanceError(
            "Expected an integer for {}, got {!r}".format(what, token))


def parse_instance(text):
    """Parse a placement problem.

    Parameters
    ----------
    text : str

    Returns
    -------
    :py:class:`Instance`

    Raises
    ------
    InvalidInstanceError
        (Or one of its subclasses) if the text is malformed or describes a
        problem which cannot be placed.
    """
    tokens = iter(text.split())

    num_cells = _read_int(tokens, "the number of cells")
    num_nets = _read_int(tokens, "the number of nets")
    num_rows = _read_int(tokens, "the number of rows")
    num_cols = _read_int(tokens, "the number of columns")

    if num_nets < 0:
        raise InvalidInstanceError(
            "Number of nets must not be negative, not {}".format(num_nets))
    if num_rows <= 0 or num_cols <= 0:
        raise InvalidInstanceError(
            "Grid dimensions must be positive, not {}x{}".format(
                num_rows, num_cols))

    nets = []
    for i in range(num_nets):
        num_components = _read_int(
            tokens, "the number of cells in net {}".format(i))
        if num_components < 0:
            raise InvalidInstanceError(
                "Net {} has a negative number of cells".format(i))
        nets.append(Net((_read_int(tokens, "a cell of net {}".format(i))
                         for _ in range(num_components)),
                        name="net{}".format(i)))

    remaining = list(tokens)
    if remaining:
        raise InvalidInstanceError(
            "Unexpected data after the last net: {!r}".format(
                " ".join(remaining[:4])))

    grid = Grid(num_rows, num_cols)
    validate_problem(grid, num_cells, nets)

    return Instance(num_cells, grid, nets)


def load_instance(filename):
    """Read a placement problem from a file.

    See :py:func:`parse_instance`.
    """
    with open(filename, "r") as f:
        return parse_instance(f.read())
