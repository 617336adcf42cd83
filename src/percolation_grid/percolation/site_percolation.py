"""
Site percolation facade.

Percolation owns the open-site matrix, does the bounds checking and open
bookkeeping once, and delegates connectivity to a pluggable FillStrategy.
"""

from typing import Callable, Optional, Union

import numpy as np

from .fill import DEFAULT_FILL, FillStrategy, UnionFindFill, get_fill
from .grid import check_site, check_size, in_bounds

FillFactory = Callable[[int], FillStrategy]


class Percolation:
    """
    Site percolation on a size x size grid.
    
    All sites start blocked. open() moves a site from blocked to open exactly
    once; is_full() and percolates() are answered by the fill strategy.
    
    Example:
        perc = Percolation(3, fill='union-find')
        for row in range(3):
            perc.open(row, 0)
        perc.percolates()  # True
    """
    
    def __init__(self, size: int, fill: Union[str, FillFactory] = DEFAULT_FILL,
                 union_find=None):
        """
        Initialize a fully blocked grid.
        
        Args:
            size: Number of rows and columns (>= 1)
            fill: Fill strategy name (see FILL_STRATEGIES) or a callable
                taking the grid size and returning a FillStrategy
            union_find: Disjoint-set instance, factory or name. Only
                accepted with the union-find fill
        """
        self.size = check_size(size)
        self.grid = np.zeros((self.size, self.size), dtype=bool)
        self._open_count = 0
        
        if isinstance(fill, str):
            fill_cls = get_fill(fill)
            if issubclass(fill_cls, UnionFindFill):
                self.fill = fill_cls(self.size, union_find=union_find)
                return
        else:
            fill_cls = fill
        
        if union_find is not None:
            raise ValueError("union_find is only accepted with the union-find fill")
        self.fill = fill_cls(self.size)
    
    @property
    def fill_name(self) -> Optional[str]:
        return self.fill.name
    
    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) is a valid site, without raising."""
        return in_bounds(self.size, row, col)
    
    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not already open.
        
        Args:
            row: Row index in [0, size)
            col: Column index in [0, size)
            
        Raises:
            IndexOutOfRange: If (row, col) is not on the grid
        """
        check_site(self.size, row, col)
        if self.grid[row, col]:
            return
        
        self.grid[row, col] = True
        self._open_count += 1
        self.fill.on_open(self.grid, row, col)
    
    def is_open(self, row: int, col: int) -> bool:
        """Check whether site (row, col) is open."""
        check_site(self.size, row, col)
        return bool(self.grid[row, col])
    
    def is_full(self, row: int, col: int) -> bool:
        """Check whether site (row, col) is open and connected to the top row."""
        check_site(self.size, row, col)
        return self.fill.is_full(self.grid, row, col)
    
    def percolates(self) -> bool:
        """Check whether an open path connects the top row to the bottom row."""
        return self.fill.percolates(self.grid)
    
    def number_of_open_sites(self) -> int:
        return self._open_count
    
    def open_sites(self) -> np.ndarray:
        """Copy of the boolean open-site matrix."""
        return self.grid.copy()
    
    def full_sites(self) -> np.ndarray:
        """Boolean matrix of full sites."""
        return self.fill.full_sites(self.grid)
    
    def __repr__(self) -> str:
        return (f"Percolation(size={self.size}, fill={self.fill_name!r}, "
                f"open={self._open_count})")


def create(size: int, fill: Union[str, FillFactory] = DEFAULT_FILL,
           union_find=None) -> Percolation:
    """
    Create a Percolation instance.
    
    Args:
        size: Number of rows and columns (>= 1)
        fill: Fill strategy name or factory
        union_find: Disjoint-set instance, factory or name for the
            union-find fill
        
    Returns:
        A fully blocked Percolation
    """
    return Percolation(size, fill=fill, union_find=union_find)
