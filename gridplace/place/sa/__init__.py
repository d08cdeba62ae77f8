"""A simulated-annealing based placer.

The annealing algorithm is broken into two components: the high-level algorithm
implementation :py:func:`~gridplace.place.sa.place` and a simulated annealing
placement :py:class:`~gridplace.place.sa.kernel.Kernel`.

The algorithm takes care of initial placement, validates the problem and
manages the annealing schedule.

The kernel is responsible for performing the kernel of the annealing operation:
moving cells, evaluating the change in cost and reverting (some) bad moves.
Two kernels are included:
:py:class:`~gridplace.place.sa.python_kernel.PythonKernel` recomputes the
whole cost after every move while
:py:class:`~gridplace.place.sa.incremental_kernel.IncrementalKernel` only
re-evaluates the nets affected by a move.
"""

from gridplace.place.sa.algorithm import \
    place, anneal, PlacementResult, AnnealerState
