"""Wirelength cost functions."""

from gridplace.exceptions import InvalidNetError


def net_wirelength(cells, net):
    """Get the half-perimeter of the bounding box of a net.

    Parameters
    ----------
    cells : [:py:class:`~gridplace.layout.Cell`, ...]
        All cells, indexed by cell id.
    net : :py:class:`~gridplace.netlist.Net`

    Returns
    -------
    int

    Raises
    ------
    InvalidNetError
        If the net has no members.
    """
    if len(net) == 0:
        raise InvalidNetError("{} references no cells".format(net))

    # Called for every net on every trial move so min/max are avoided here.
    members = iter(net)
    first = cells[next(members)]
    r1 = r2 = first.row
    c1 = c2 = first.column
    for cell_id in members:
        cell = cells[cell_id]
        r1 = cell.row if cell.row < r1 else r1
        r2 = cell.row if cell.row > r2 else r2
        c1 = cell.column if cell.column < c1 else c1
        c2 = cell.column if cell.column > c2 else c2

    return (c2 - c1) + (r2 - r1)


def total_wirelength(cells, nets):
    """Get the total wirelength of a placement: the sum of every net's
    bounding box half-perimeter.

    This is always recomputed from scratch.

    Parameters
    ----------
    cells : [:py:class:`~gridplace.layout.Cell`, ...]
    nets : [:py:class:`~gridplace.netlist.Net`, ...]

    Returns
    -------
    int
    """
    return sum((net_wirelength(cells, net) for net in nets), 0)
