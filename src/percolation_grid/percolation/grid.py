"""
Grid geometry shared by the facade and every fill strategy.

Sites are addressed (row, col), 0-indexed, with row 0 at the top.
"""

from numbers import Integral
from typing import Iterator, Tuple

from ..errors import IndexOutOfRange, InvalidSize

# Up, down, left, right
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def check_size(size: int) -> int:
    """
    Validate a grid size.
    
    Args:
        size: Number of rows (and columns)
        
    Returns:
        The size as a plain int
    """
    if isinstance(size, bool) or not isinstance(size, Integral):
        raise InvalidSize(f"Grid size must be an integer, got {size!r}")
    if size < 1:
        raise InvalidSize(f"Grid size must be >= 1, got {size}")
    return int(size)


def _is_index(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def in_bounds(size: int, row: int, col: int) -> bool:
    """Check whether (row, col) are integers that lie on a size x size grid."""
    if not (_is_index(row) and _is_index(col)):
        return False
    return 0 <= row < size and 0 <= col < size


def check_site(size: int, row: int, col: int) -> None:
    """Raise IndexOutOfRange unless (row, col) lies on a size x size grid."""
    if not in_bounds(size, row, col):
        raise IndexOutOfRange(f"({row},{col}) not in bounds for size {size}")


def neighbors(size: int, row: int, col: int) -> Iterator[Tuple[int, int]]:
    """
    Yield the in-bounds 4-neighbors of (row, col).
    
    Each direction is bounds-checked independently, so edge and corner
    sites yield fewer than four neighbors.
    """
    for d_row, d_col in NEIGHBOR_OFFSETS:
        n_row = row + d_row
        n_col = col + d_col
        if 0 <= n_row < size and 0 <= n_col < size:
            yield n_row, n_col
