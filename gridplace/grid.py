"""Defines the discrete grid onto which cells are placed."""


class Grid(object):
    """The positions available to a placement.

    Attributes
    ----------
    rows : int
        The number of rows: positions have row-coordinates between 0 and
        rows-1 inclusive.
    cols : int
        The number of columns: positions have column-coordinates between 0
        and cols-1 inclusive.
    """
    __slots__ = ["rows", "cols"]

    def __init__(self, rows, cols):
        if rows <= 0 or cols <= 0:
            raise ValueError(
                "Grid dimensions must be positive, not {}x{}".format(
                    rows, cols))
        self.rows = rows
        self.cols = cols

    def __eq__(self, other):
        return (isinstance(other, Grid) and
                self.rows == other.rows and
                self.cols == other.cols)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.rows, self.cols))

    def __repr__(self):
        return "<Grid {}x{}>".format(self.rows, self.cols)

    def __len__(self):
        """The number of positions in the grid."""
        return self.rows * self.cols

    def __contains__(self, position):
        """Test whether a (row, col) position lies within the grid."""
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def __iter__(self):
        """Iterate over every (row, col) position in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)
