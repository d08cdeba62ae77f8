# pragma: no cover

"""General interface for a SA algorithm kernel."""


class Kernel(object):
    """A general API for a SA algorithm kernel."""

    def __init__(self, layout, random, **kwargs):
        """Initialise the algorithm kernel with a placed layout.

        The kernel must take its own copy of the layout: the layout passed in
        is the initial placement and must not be modified.

        Parameters
        ----------
        layout : :py:class:`~gridplace.layout.Layout`
            A validated layout with a legal placement.
        random : :py:class:`random.Random`
            The random number generator to use for every random decision.

        Attributes
        ----------
        cost : int
            The total wirelength of the kernel's current placement.
        """
        raise NotImplementedError()

    def run_steps(self, num_steps, temperature):
        """Attempt num_steps trial moves.

        Each trial selects a cell and a target position uniformly at random,
        rejects the move if the target is the cell's own position or is
        occupied by another cell and otherwise accepts or reverts it according
        to the Metropolis criterion.

        Parameters
        ----------
        num_steps : int
            The number of trial moves to be made.
        temperature : float > 0.0
            The current annealing temperature.

        Returns
        -------
        num_accepted : int
            The number of accepted moves.
        cost : int
            The total wirelength of the placement after all moves have been
            attempted.
        """
        raise NotImplementedError()

    def get_layout(self):
        """Get the current placement solution.

        Returns
        -------
        :py:class:`~gridplace.layout.Layout`
        """
        raise NotImplementedError()
