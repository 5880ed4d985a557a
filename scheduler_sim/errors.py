from __future__ import annotations


class InvalidProcessSet(ValueError):
    """
    Raised when a process sequence cannot be simulated: it is empty, it has
    no process with a positive burst, or it carries non-finite / negative
    times.
    """
