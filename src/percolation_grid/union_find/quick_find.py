"""
Quick-find disjoint set.

Every element stores the id of its set directly, so find is a single lookup
and union relabels one whole set.
"""

import numpy as np

from .base import DisjointSet


class QuickFindUF(DisjointSet):
    """
    Quick-find union-find: O(1) find, O(n) union.
    """
    
    def _reset(self, n: int) -> None:
        self._ids = np.arange(n, dtype=np.int64)
    
    def find(self, p: int) -> int:
        self._validate(p)
        return int(self._ids[p])
    
    def _link(self, root_p: int, root_q: int) -> None:
        # Relabel every member of p's set in one vectorized pass
        self._ids[self._ids == root_p] = root_q
