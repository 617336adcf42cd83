"""
Fill strategies: the pluggable connectivity index behind Percolation.

A fill strategy answers "is this open site connected to the top row" and is
told about every newly opened site. The facade owns the open-site matrix and
passes it in; each strategy owns whatever index it needs to answer
is_full() and percolates().

Strategies:
    dfs-recompute - rescan the whole grid on every open (baseline)
    dfs           - incremental depth-first flood from the opened site
    bfs           - incremental breadth-first flood from the opened site
    union-find    - incremental unions with virtual top/bottom nodes
"""

import copy
from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Dict, Optional, Type, Union

import numpy as np

from .grid import check_site, neighbors
from ..union_find import DisjointSet, WeightedQuickUnionUF, get_union_find


class FillStrategy(ABC):
    """
    Abstract base class for all fill strategies.
    
    A strategy instance is bound to a single grid size and is exclusively
    owned by one Percolation instance.
    """
    
    name = None
    
    def __init__(self, size: int):
        self.size = size
    
    @abstractmethod
    def on_open(self, grid: np.ndarray, row: int, col: int) -> None:
        """
        Update the connectivity index after (row, col) was opened.
        
        Args:
            grid: Boolean open-site matrix, already updated
            row: Row of the newly opened site
            col: Column of the newly opened site
        """
        pass
    
    @abstractmethod
    def is_full(self, grid: np.ndarray, row: int, col: int) -> bool:
        """Check whether (row, col) is connected to the top row."""
        pass
    
    @abstractmethod
    def percolates(self, grid: np.ndarray) -> bool:
        """Check whether the top row is connected to the bottom row."""
        pass
    
    def full_sites(self, grid: np.ndarray) -> np.ndarray:
        """
        Boolean matrix of full sites.
        
        The default asks is_full() for every open site; grid-scanning
        strategies return their stored flags instead.
        """
        full = np.zeros_like(grid, dtype=bool)
        for row, col in zip(*np.nonzero(grid)):
            full[row, col] = self.is_full(grid, int(row), int(col))
        return full


class GridFill(FillStrategy):
    """
    Base for strategies that store a full flag per site.
    
    Full flags only ever go from False to True, except in the recompute
    baseline which rebuilds them from scratch on each open.
    """
    
    def __init__(self, size: int):
        super().__init__(size)
        self.full = np.zeros((size, size), dtype=bool)
    
    def is_full(self, grid: np.ndarray, row: int, col: int) -> bool:
        return bool(self.full[row, col])
    
    def percolates(self, grid: np.ndarray) -> bool:
        return bool(self.full[-1].any())
    
    def full_sites(self, grid: np.ndarray) -> np.ndarray:
        return self.full.copy()
    
    def should_fill(self, row: int, col: int) -> bool:
        """A newly opened site becomes full if it is on the top row or touches a full site."""
        if row == 0:
            return True
        return any(self.full[n_row, n_col] for n_row, n_col in neighbors(self.size, row, col))
    
    def flood(self, grid: np.ndarray, row: int, col: int) -> None:
        """
        Mark (row, col) and every open site reachable from it as full.
        
        Depth-first, with an explicit stack so the traversal depth does not
        depend on the Python recursion limit.
        
        Args:
            grid: Boolean open-site matrix
            row: Start row
            col: Start column
        """
        check_site(self.size, row, col)
        if self.full[row, col] or not grid[row, col]:
            return
        
        full = self.full
        self.full[row, col] = True
        stack = [(row, col)]
        while stack:
            cur_row, cur_col = stack.pop()
            for n_row, n_col in neighbors(self.size, cur_row, cur_col):
                if grid[n_row, n_col] and not full[n_row, n_col]:
                    full[n_row, n_col] = True
                    stack.append((n_row, n_col))


class DFSRecomputeFill(GridFill):
    """
    Baseline: clear every full flag and re-flood from the whole top row on
    each open. O(N^2) per open.
    """
    
    name = 'dfs-recompute'
    
    def on_open(self, grid: np.ndarray, row: int, col: int) -> None:
        self.full[:] = False
        for top_col in range(self.size):
            if grid[0, top_col]:
                self.flood(grid, 0, top_col)


class DFSFill(GridFill):
    """
    Incremental depth-first fill: only floods when the newly opened site
    should become full.
    """
    
    name = 'dfs'
    
    def on_open(self, grid: np.ndarray, row: int, col: int) -> None:
        check_site(self.size, row, col)
        if self.should_fill(row, col):
            self.flood(grid, row, col)


class BFSFill(DFSFill):
    """
    Incremental breadth-first fill.
    
    Same trigger and same final marking as DFSFill; only the visiting order
    differs.
    """
    
    name = 'bfs'
    
    def flood(self, grid: np.ndarray, row: int, col: int) -> None:
        check_site(self.size, row, col)
        if self.full[row, col] or not grid[row, col]:
            return
        
        full = self.full
        full[row, col] = True
        queue = deque([(row, col)])
        while queue:
            cur_row, cur_col = queue.popleft()
            for n_row, n_col in neighbors(self.size, cur_row, cur_col):
                if grid[n_row, n_col] and not full[n_row, n_col]:
                    full[n_row, n_col] = True
                    queue.append((n_row, n_col))


UnionFindFactory = Callable[[], DisjointSet]


class UnionFindFill(FillStrategy):
    """
    Union-find fill with virtual top and bottom nodes.
    
    Site (row, col) is element row * size + col; VTOP = size^2 and
    VBOTTOM = size^2 + 1. Opened top-row sites are unioned with VTOP,
    opened bottom-row sites with VBOTTOM, and every opened site with its
    open neighbors.
    
    A second structure that never sees VBOTTOM answers is_full(), so a
    bottom-row site cannot become full through VBOTTOM once the system
    percolates (backwash).
    """
    
    name = 'union-find'
    
    def __init__(self, size: int,
                 union_find: Optional[Union[str, DisjointSet, UnionFindFactory]] = None):
        """
        Initialize the two disjoint-set structures.
        
        Args:
            size: Grid size
            union_find: Disjoint-set instance, factory or registered name
                (default: weighted quick-union with path compression).
                An instance is used as the main structure and a deep copy of
                it, taken before initialize(), as the top-only structure.
        """
        super().__init__(size)
        if union_find is None:
            union_find = WeightedQuickUnionUF
        elif isinstance(union_find, str):
            union_find = get_union_find(union_find)
        
        self.vtop = size * size
        self.vbottom = size * size + 1
        
        if isinstance(union_find, DisjointSet):
            self.finder = union_find
            # Top-only connectivity, used for is_full()
            self.top_finder = copy.deepcopy(union_find)
        else:
            self.finder = union_find()
            self.top_finder = union_find()
        self.finder.initialize(size * size + 2)
        self.top_finder.initialize(size * size + 1)
    
    def site_id(self, row: int, col: int) -> int:
        return row * self.size + col
    
    def on_open(self, grid: np.ndarray, row: int, col: int) -> None:
        check_site(self.size, row, col)
        site = self.site_id(row, col)
        
        for n_row, n_col in neighbors(self.size, row, col):
            if grid[n_row, n_col]:
                neighbor = self.site_id(n_row, n_col)
                self.finder.union(site, neighbor)
                self.top_finder.union(site, neighbor)
        
        if row == 0:
            self.finder.union(site, self.vtop)
            self.top_finder.union(site, self.vtop)
        if row == self.size - 1:
            self.finder.union(site, self.vbottom)
    
    def is_full(self, grid: np.ndarray, row: int, col: int) -> bool:
        return self.top_finder.connected(self.site_id(row, col), self.vtop)
    
    def percolates(self, grid: np.ndarray) -> bool:
        return self.finder.connected(self.vtop, self.vbottom)


FILL_STRATEGIES: Dict[str, Type[FillStrategy]] = {
    'dfs-recompute': DFSRecomputeFill,
    'dfs': DFSFill,
    'bfs': BFSFill,
    'union-find': UnionFindFill,
}

DEFAULT_FILL = 'bfs'


def get_fill(name: str) -> Type[FillStrategy]:
    """
    Look up a fill strategy class by name.
    
    Args:
        name: One of FILL_STRATEGIES
        
    Returns:
        FillStrategy subclass
    """
    try:
        return FILL_STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown fill strategy '{name}'. Available: {sorted(FILL_STRATEGIES)}"
        ) from None
