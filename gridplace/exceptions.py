"""Exceptions raised when a placement problem cannot be annealed.
"""


class InvalidInstanceError(Exception):
    """Indication that a placement problem is malformed or inconsistent and
    cannot be placed.
    """
    pass


class InsufficientCapacityError(InvalidInstanceError):
    """Indication that the grid has fewer positions than there are cells to
    place.
    """
    pass


class DegenerateInstanceError(InvalidInstanceError):
    """Indication that a problem has no nets and thus no meaningful
    annealing schedule.
    """
    pass


class InvalidNetError(InvalidInstanceError):
    """Indication that a net does not reference any cells."""
    pass
