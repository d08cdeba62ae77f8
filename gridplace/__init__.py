"""Simulated annealing placement of cells onto a discrete grid."""

from gridplace.version import __version__
