"""A command-line utility which places a problem read from a file once for
each of a series of cooling rates, displaying the placement before and after
annealing.

Installed as "gridplace-anneal" by setuptools.
"""

import sys
import logging
import argparse
import random as default_random

import gridplace

from gridplace.exceptions import InvalidInstanceError

from gridplace.instance import load_instance

from gridplace.layout import Layout

from gridplace.place.rand import initial_placement

from gridplace.place.cost import total_wirelength

from gridplace.place.sa import anneal
from gridplace.place.sa.algorithm import \
    initial_temperature, final_temperature

from gridplace.place.sa.python_kernel import PythonKernel
from gridplace.place.sa.incremental_kernel import IncrementalKernel

from gridplace.render import format_placement, format_occupancy, clear_lines


"""The cooling rates tried when none are given on the command line."""
DEFAULT_COOLING_RATES = [0.75, 0.8, 0.85, 0.9, 0.95]

KERNELS = {
    "python": PythonKernel,
    "incremental": IncrementalKernel,
}


def anneal_instance(instance, cooling_rate, random=default_random,
                    kernel=PythonKernel, animate=False, cell_width=4):
    """Place an instance from a fresh random initial placement, printing
    progress to stdout.

    Returns
    -------
    :py:class:`~gridplace.place.sa.PlacementResult`
    """
    layout = Layout(instance.grid,
                    initial_placement(instance.grid, instance.num_cells,
                                      random),
                    instance.nets)

    print("")
    print("Initial placement:")
    print(format_placement(layout.cells, layout.grid, cell_width))

    wirelength = total_wirelength(layout.cells, layout.nets)
    print("Initial wirelength: {}".format(wirelength))
    print("Initial temperature: {:g}".format(initial_temperature(wirelength)))
    print("Final temperature: {:g}".format(
        final_temperature(wirelength, len(layout.nets))))
    print("The final results for cooling rate: {:g}".format(cooling_rate))

    on_temperature_change = None
    if animate:
        # Each frame is a heading followed by one line per grid row.
        frame_lines = instance.grid.rows + 1
        frames = []

        def on_temperature_change(stage, layout, cost, acceptance_rate,
                                  temperature):
            if frames:
                sys.stdout.write(clear_lines(frame_lines))
            print("Stage {} (wirelength {}):".format(stage, cost))
            print(format_placement(layout.cells, layout.grid, cell_width))
            sys.stdout.flush()
            frames.append(stage)

    result = anneal(layout, cooling_rate, random=random, kernel=kernel,
                    on_temperature_change=on_temperature_change)

    print("Final placement:")
    print(format_placement(result.final_layout.cells, layout.grid,
                           cell_width))
    print("Occupancy:")
    print(format_occupancy(result.final_layout.cells, layout.grid,
                           cell_width))
    print("Final wirelength: {}".format(result.wirelength))
    print("Execution time: {:.3f} seconds".format(result.duration))

    return result


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Place cells onto a grid by simulated annealing, once "
                    "per cooling rate")
    parser.add_argument("--version", "-V", action="version",
                        version="%(prog)s {}".format(gridplace.__version__))

    parser.add_argument("instance", type=str,
                        help="file describing the cells, nets and grid")

    parser.add_argument("--cooling-rate", "-r", type=float,
                        action="append", dest="cooling_rates",
                        metavar="RATE",
                        help="factor applied to the temperature after each "
                             "stage, may be given several times (default: "
                             "{})".format(" ".join(
                                 map(str, DEFAULT_COOLING_RATES))))
    parser.add_argument("--seed", type=int, default=None,
                        help="seed the random number generator of each run")
    parser.add_argument("--kernel", choices=sorted(KERNELS),
                        default="python",
                        help="annealing kernel to use (default: "
                             "%(default)s)")
    parser.add_argument("--animate", action="store_true",
                        help="redraw the placement after every stage")
    parser.add_argument("--cell-width", type=int, default=4,
                        help="characters used to display each grid position "
                             "(default: %(default)s)")
    parser.add_argument("--pause", action="store_true",
                        help="wait for enter to be pressed between runs")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="log annealing progress (give twice for "
                             "per-stage detail)")

    args = parser.parse_args(args)

    cooling_rates = args.cooling_rates or DEFAULT_COOLING_RATES
    for cooling_rate in cooling_rates:
        if not 0.0 < cooling_rate < 1.0:
            parser.error("cooling rate must be between 0.0 and 1.0 "
                         "exclusive, not {:g}".format(cooling_rate))
    if args.cell_width < 1:
        parser.error("cell width must be positive")

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO)

    for i, cooling_rate in enumerate(cooling_rates):
        try:
            instance = load_instance(args.instance)
        except (IOError, OSError) as e:
            sys.stderr.write("{}: error: cannot read {}: {}\n".format(
                parser.prog, args.instance, e))
            return 1
        except InvalidInstanceError as e:
            sys.stderr.write("{}: error: invalid instance {}: {}\n".format(
                parser.prog, args.instance, e))
            return 1

        if args.seed is None:
            r = default_random.Random()
        else:
            r = default_random.Random(args.seed)

        anneal_instance(instance, cooling_rate, random=r,
                        kernel=KERNELS[args.kernel], animate=args.animate,
                        cell_width=args.cell_width)

        if args.pause and i + 1 < len(cooling_rates):
            input("Press enter to continue...")

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
