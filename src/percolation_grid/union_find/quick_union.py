"""
Quick-union disjoint set without weighting or path compression.

Kept as the unbalanced baseline: trees can degenerate into chains, so find
is O(n) in the worst case.
"""

import numpy as np

from .base import DisjointSet


class QuickUnionUF(DisjointSet):
    """
    Quick-union: each element links to a parent; roots link to themselves.
    """
    
    def _reset(self, n: int) -> None:
        self._parent = np.arange(n, dtype=np.int64)
    
    def find(self, p: int) -> int:
        self._validate(p)
        parent = self._parent
        while p != parent[p]:
            p = parent[p]
        return int(p)
    
    def _link(self, root_p: int, root_q: int) -> None:
        self._parent[root_p] = root_q
