"""
Exception types raised by the percolation core.

Every error derives from PercolationError so callers can catch the whole
family, and from the matching builtin so plain IndexError/ValueError
handlers keep working.
"""


class PercolationError(Exception):
    """Base class for all percolation_grid errors."""


class IndexOutOfRange(PercolationError, IndexError):
    """A site coordinate or disjoint-set element id is outside the valid range."""


class InvalidSize(PercolationError, ValueError):
    """A grid or disjoint-set size is not a positive integer."""


class UninitializedError(PercolationError, RuntimeError):
    """A disjoint-set structure was used before initialize() was called."""


class FillMismatchError(PercolationError, AssertionError):
    """Two fill strategies disagreed on the same sequence of opened sites."""
