"""A Simulated Annealing kernel which only re-evaluates the nets affected by
each move.
"""

from gridplace.place.cost import net_wirelength

from gridplace.place.sa.kernel import Kernel
from gridplace.place.sa.python_kernel import _propose_move, _accept


class IncrementalKernel(Kernel):
    """A kernel which caches the wirelength of every net.

    After a trial move only the nets containing the moved cell are
    re-evaluated. Since wirelengths are integers the running total is always
    exactly equal to the from-scratch total and, given the same random
    number generator state, this kernel makes exactly the same decisions as
    :py:class:`~gridplace.place.sa.python_kernel.PythonKernel`.
    """

    def __init__(self, layout, random):
        self.layout = layout.copy()
        self.random = random

        # Cell-to-Nets: A lookup {cell_id: [net_index, ...], ...} listing the
        # nets of which each cell is a member.
        self.c2n = {cell.id: [] for cell in self.layout.cells}
        for i, net in enumerate(self.layout.nets):
            for cell_id in set(net):
                self.c2n[cell_id].append(i)

        self.net_costs = [net_wirelength(self.layout.cells, net)
                          for net in self.layout.nets]
        self.cost = sum(self.net_costs, 0)

    def run_steps(self, num_steps, temperature):
        num_accepted = 0
        for _ in range(num_steps):
            num_accepted += 1 if self._step(temperature) else 0

        return num_accepted, self.cost

    def get_layout(self):
        return self.layout

    def _step(self, temperature):
        """Attempt a single trial move, returning True if it was kept."""
        cells = self.layout.cells
        move = _propose_move(cells, self.layout.grid, self.random)
        if move is None:
            return False
        cell, row, column = move

        affected = self.c2n[cell.id]
        cost_before = sum((self.net_costs[i] for i in affected), 0)

        old_row, old_column = cell.row, cell.column
        cell.row, cell.column = row, column

        new_net_costs = [net_wirelength(cells, self.layout.nets[i])
                         for i in affected]
        new_cost = self.cost - cost_before + sum(new_net_costs, 0)

        if _accept(new_cost - self.cost, temperature, self.random):
            for i, net_cost in zip(affected, new_net_costs):
                self.net_costs[i] = net_cost
            self.cost = new_cost
            return True
        else:
            cell.row, cell.column = old_row, old_column
            return False
