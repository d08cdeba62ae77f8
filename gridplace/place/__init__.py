"""Placement algorithms.

:py:func:`~gridplace.place.rand.initial_placement` produces a random legal
placement which :py:func:`~gridplace.place.sa.place` improves by simulated
annealing.
"""

from gridplace.place.sa import place
