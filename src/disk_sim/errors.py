"""Errors raised by the scheduling engine and its input parsers.

Every failure is an ordinary exception the caller can catch.  A bad
request list should never take down the program that asked for the
simulation.  All of them share ``DiskSchedulingError`` as a base so a
shell can report any engine problem with a single ``except``.
"""


class DiskSchedulingError(Exception):
    """Raise when a simulation cannot be run."""


class InvalidInputError(DiskSchedulingError, ValueError):
    """Raise when requests, head, or disk size are malformed or out of range."""


class EmptyRequestSetError(InvalidInputError):
    """Raise when request text contains no requests at all."""
