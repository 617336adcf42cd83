"""Site percolation with interchangeable fill strategies."""

from .site_percolation import Percolation, create
from .fill import (
    FillStrategy, DFSRecomputeFill, DFSFill, BFSFill, UnionFindFill,
    FILL_STRATEGIES, DEFAULT_FILL, get_fill,
)

__all__ = [
    'Percolation', 'create', 'FillStrategy', 'DFSRecomputeFill', 'DFSFill',
    'BFSFill', 'UnionFindFill', 'FILL_STRATEGIES', 'DEFAULT_FILL', 'get_fill',
]
