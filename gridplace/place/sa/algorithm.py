"""The main annealing algorithm loop."""

import math
import time
import logging

from collections import namedtuple

from enum import Enum

# This is renamed to ensure that all function correctly use the random number
# generator passed into them.
import random as default_random

from gridplace.exceptions import DegenerateInstanceError

from gridplace.layout import Layout, validate_problem

from gridplace.place.cost import total_wirelength

from gridplace.place.rand import initial_placement

from gridplace.place.sa.python_kernel import PythonKernel


"""
This logger is used by the annealing algorithm to indicate progress.
"""
logger = logging.getLogger(__name__.split(".")[-1])


"""The number of trial moves made per cell at each temperature."""
MOVES_PER_CELL = 10

"""The initial temperature is this multiple of the initial wirelength."""
INITIAL_TEMPERATURE_FACTOR = 500.0

"""The final temperature is this multiple of the initial wirelength per
net."""
FINAL_TEMPERATURE_FACTOR = 5e-6


class AnnealerState(Enum):
    """The state of the annealing schedule."""

    running = 1
    """The temperature is above the final temperature: stages are run."""

    terminated = 2
    """The temperature has fallen to the final temperature: no further moves
    are attempted."""


PlacementResult = namedtuple("PlacementResult",
                             "initial_layout final_layout "
                             "initial_wirelength wirelength "
                             "initial_temperature final_temperature "
                             "cooling_rate stages duration")
"""The outcome of an annealing run.

Attributes
----------
initial_layout : :py:class:`~gridplace.layout.Layout`
    The placement before annealing.
final_layout : :py:class:`~gridplace.layout.Layout`
    The placement after annealing.
initial_wirelength : int
wirelength : int
    The total wirelength of the final placement.
initial_temperature : float
final_temperature : float
cooling_rate : float
stages : int
    The number of temperatures at which trial moves were made.
duration : float
    Wall-clock duration of the run in seconds (informational only).
"""


def initial_temperature(wirelength):
    """Get the starting temperature for a placement with the given initial
    wirelength.
    """
    return INITIAL_TEMPERATURE_FACTOR * wirelength


def final_temperature(wirelength, num_nets):
    """Get the temperature at which annealing stops.

    Raises
    ------
    DegenerateInstanceError
        If there are no nets.
    """
    if num_nets == 0:
        raise DegenerateInstanceError(
            "Cannot determine a final temperature without any nets")
    return FINAL_TEMPERATURE_FACTOR * wirelength / num_nets


def num_stages(initial, final, cooling_rate):
    """Get the number of stages a geometric schedule runs for.

    Parameters
    ----------
    initial : float
        The initial temperature.
    final : float
        The final temperature.
    cooling_rate : float
        The factor applied to the temperature after every stage, between 0.0
        and 1.0 exclusive.

    Returns
    -------
    int
        The number of stages run before the temperature falls to (or below)
        the final temperature.
    """
    if not initial > final > 0.0:
        return 0
    return int(math.ceil(math.log(final / initial) / math.log(cooling_rate)))


def _check_cooling_rate(cooling_rate):
    if not 0.0 < cooling_rate < 1.0:
        raise ValueError(
            "Cooling rate must be between 0.0 and 1.0 exclusive, "
            "not {}".format(cooling_rate))


def anneal(layout, cooling_rate, random=default_random,
           kernel=PythonKernel, on_temperature_change=None, kernel_kwargs={}):
    """Improve an existing placement by simulated annealing.

    The supplied layout is not modified: the final placement is returned as
    a new layout.

    The temperature starts at 500 times the initial wirelength and is
    multiplied by ``cooling_rate`` after every stage of ``10 * len(cells)``
    trial moves until it falls to 5e-6 times the initial wirelength per net.

    This algorithm produces INFO level logging information describing the
    progress made by the algorithm and DEBUG level information for every
    stage.

    Parameters
    ----------
    layout : :py:class:`~gridplace.layout.Layout`
        The initial placement. This must have a legal placement and at least
        one net.
    cooling_rate : float
        The factor by which the temperature is multiplied after each stage,
        between 0.0 and 1.0 exclusive.
    random : :py:class:`random.Random`
        A Python random number generator. Defaults to ``import random`` but can
        be set to your own instance of :py:class:`random.Random` to allow you
        to control the seed and produce deterministic results.
    kernel : :py:class:`~gridplace.place.sa.kernel.Kernel`
        A simulated annealing placement kernel. Defaults to
        :py:class:`~gridplace.place.sa.python_kernel.PythonKernel`.
    on_temperature_change : callback_function or None
        An (optional) callback function which is called after every stage.
        The callback function is passed the following arguments:

        * ``stage``: the number of stages completed so far (integer)
        * ``layout``: the kernel's current layout. This must not be
          modified.
        * ``cost``: the current total wirelength (integer)
        * ``acceptance_rate``: the proportion of trial moves in the stage
          which were accepted (float between 0.0 and 1.0)
        * ``temperature``: the temperature of the next stage (float)

        The return value is ignored.
    kernel_kwargs : dict
        Optional kernel-specific keyword arguments to pass to the kernel
        constructor.

    Returns
    -------
    :py:class:`PlacementResult`

    Raises
    ------
    InvalidInstanceError
        (Or one of its subclasses) if the layout cannot be annealed.
    ValueError
        If the cooling rate is not between 0.0 and 1.0.
    """
    _check_cooling_rate(cooling_rate)
    layout.validate()

    start_time = time.time()

    initial_wirelength = total_wirelength(layout.cells, layout.nets)
    temperature = t0 = initial_temperature(initial_wirelength)
    tf = final_temperature(initial_wirelength, len(layout.nets))

    logger.info("Initial wirelength: %d", initial_wirelength)
    logger.info("Initial placement temperature: %0.3f, final: %0.3g",
                t0, tf)

    state = (AnnealerState.running if temperature > tf
             else AnnealerState.terminated)

    stages = 0
    cost = initial_wirelength

    # Special case: a zero-cost placement cannot be improved, the kernel is
    # not used.
    if state is AnnealerState.terminated:
        logger.info("Placement has trivial solution. SA not used.")
        final_layout = layout.copy()
    else:
        k = kernel(layout, random, **kernel_kwargs)
        logger.info("SA placement kernel: %s", kernel.__name__)

        num_steps = MOVES_PER_CELL * len(layout.cells)

        while state is AnnealerState.running:
            num_accepted, cost = k.run_steps(num_steps, temperature)
            r_accept = num_accepted / float(num_steps)

            temperature *= cooling_rate
            stages += 1

            logger.debug("Stage: %d, "
                         "Cost: %d, "
                         "Kept: %0.1f%%, "
                         "Temp: %0.3g.",
                         stages, cost, r_accept*100, temperature)

            if on_temperature_change is not None:
                on_temperature_change(stages, k.get_layout(), cost,
                                      r_accept, temperature)

            if not temperature > tf:
                state = AnnealerState.terminated

        final_layout = k.get_layout()

    duration = time.time() - start_time
    logger.info("Anneal terminated after %d stages with wirelength %d "
                "(%0.2f s).", stages, cost, duration)

    return PlacementResult(initial_layout=layout,
                           final_layout=final_layout,
                           initial_wirelength=initial_wirelength,
                           wirelength=cost,
                           initial_temperature=t0,
                           final_temperature=tf,
                           cooling_rate=cooling_rate,
                           stages=stages,
                           duration=duration)


def place(grid, num_cells, nets, cooling_rate, random=default_random,
          kernel=PythonKernel, on_temperature_change=None, kernel_kwargs={}):
    """Place cells onto a grid using simulated annealing.

    A uniformly random initial placement is generated with
    :py:func:`~gridplace.place.rand.initial_placement` and then improved
    with :py:func:`anneal`.

    Parameters
    ----------
    grid : :py:class:`~gridplace.grid.Grid`
    num_cells : int
        Cells are numbered 0 to num_cells-1.
    nets : [:py:class:`~gridplace.netlist.Net`, ...]
    cooling_rate : float
    random : :py:class:`random.Random`
        Used both for the initial placement and the annealing.

    See :py:func:`anneal` for the remaining arguments.

    Returns
    -------
    :py:class:`PlacementResult`

    Raises
    ------
    InvalidInstanceError
        (Or one of its subclasses) before any placement work is done if the
        problem is malformed.
    """
    _check_cooling_rate(cooling_rate)
    validate_problem(grid, num_cells, nets)

    layout = Layout(grid, initial_placement(grid, num_cells, random), nets)

    return anneal(layout, cooling_rate, random=random, kernel=kernel,
                  on_temperature_change=on_temperature_change,
                  kernel_kwargs=kernel_kwargs)
