"""Text renderings of placements for display in a terminal."""

import numpy as np


"""Value used in placement matrices for positions holding no cell."""
EMPTY = -1


def placement_matrix(cells, grid):
    """Get a rows x cols matrix giving the id of the cell at each position.

    Parameters
    ----------
    cells : [:py:class:`~gridplace.layout.Cell`, ...]
    grid : :py:class:`~gridplace.grid.Grid`

    Returns
    -------
    :py:class:`numpy.ndarray`
        Free positions hold :py:data:`EMPTY`.
    """
    matrix = np.full((grid.rows, grid.cols), EMPTY, dtype=int)
    for cell in cells:
        matrix[cell.row, cell.column] = cell.id
    return matrix


def format_placement(cells, grid, cell_width=4):
    """Render the cell ids of a placement as text, one grid row per line.

    Each position is right-aligned in ``cell_width`` characters and followed
    by a space. Free positions are shown as ``-``.
    """
    lines = []
    for row in placement_matrix(cells, grid):
        lines.append("".join(
            "{:>{}} ".format("-" if cell_id == EMPTY else cell_id,
                             cell_width)
            for cell_id in row))
    return "\n".join(lines)


def format_occupancy(cells, grid, cell_width=4):
    """Render which positions are occupied (1) and which are free (0)."""
    occupied = placement_matrix(cells, grid) != EMPTY
    return "\n".join("".join("{:>{}} ".format(int(v), cell_width)
                             for v in row)
                     for row in occupied)


def clear_lines(num_lines):
    """Get the ANSI escape sequence which moves the cursor up and erases the
    line, repeated num_lines times.
    """
    return "\033[1A\033[2K" * num_lines
