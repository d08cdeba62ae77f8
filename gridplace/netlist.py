"""Representation of the connectivity between placed cells."""


class Net(object):
    """A group of cells which must be considered jointly connected.

    Nets only refer to cells by their id: a net does not own the cells it
    names and placements never modify a net.

    Attributes
    ----------
    cells : [int, ...]
        The ids of the cells connected by this net.
    name : str or None
        An optional human readable name for the net.
    """
    __slots__ = ["cells", "name"]

    def __init__(self, cells, name=None):
        """Create a new net.

        Parameters
        ----------
        cells : iterable of int
            The ids of the member cells. The iterable is copied.
        name : str or None
        """
        self.cells = list(cells)
        self.name = name

    def __contains__(self, cell_id):
        return cell_id in self.cells

    def __iter__(self):
        return iter(self.cells)

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        if self.name is None:
            return "<Net {}>".format(self.cells)
        else:
            return "<Net {!r} {}>".format(self.name, self.cells)
