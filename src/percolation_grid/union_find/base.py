"""
Abstract base class for disjoint-set (union-find) structures.
"""

from abc import ABC, abstractmethod
from numbers import Integral
from typing import Optional

from ..errors import IndexOutOfRange, InvalidSize, UninitializedError


class DisjointSet(ABC):
    """
    Abstract base class for all disjoint-set implementations.
    
    Instances are created empty and must be sized with initialize() before
    any find/union/connected call. Subclasses implement _reset(), find()
    and _link().
    """
    
    def __init__(self):
        self._n: Optional[int] = None
        self._count = 0
    
    def initialize(self, n: int) -> None:
        """
        Reset the structure to n singleton sets with ids 0..n-1.
        
        Args:
            n: Number of elements (must be >= 1)
        """
        if isinstance(n, bool) or not isinstance(n, Integral):
            raise InvalidSize(f"Disjoint-set size must be an integer, got {n!r}")
        if n < 1:
            raise InvalidSize(f"Disjoint-set size must be >= 1, got {n}")
        
        self._n = int(n)
        self._count = self._n
        self._reset(self._n)
    
    @property
    def size(self) -> int:
        """Number of elements in the universe."""
        self._require_initialized()
        return self._n
    
    @property
    def count(self) -> int:
        """Number of disjoint sets."""
        self._require_initialized()
        return self._count
    
    def union(self, p: int, q: int) -> None:
        """
        Merge the sets containing p and q. No-op if they are already connected.
        
        Args:
            p: Element id in [0, n)
            q: Element id in [0, n)
        """
        self._validate(p)
        self._validate(q)
        
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return
        
        self._link(root_p, root_q)
        self._count -= 1
    
    def connected(self, p: int, q: int) -> bool:
        """
        Check whether p and q belong to the same set.
        
        Args:
            p: Element id in [0, n)
            q: Element id in [0, n)
            
        Returns:
            True if p and q share a root
        """
        self._validate(p)
        self._validate(q)
        return self.find(p) == self.find(q)
    
    @abstractmethod
    def find(self, p: int) -> int:
        """
        Return the canonical element of the set containing p.
        
        Implementations must call self._validate(p) first.
        """
        pass
    
    @abstractmethod
    def _reset(self, n: int) -> None:
        """Allocate storage for n singleton sets."""
        pass
    
    @abstractmethod
    def _link(self, root_p: int, root_q: int) -> None:
        """Merge two distinct roots."""
        pass
    
    def _require_initialized(self) -> None:
        if self._n is None:
            raise UninitializedError(
                f"{type(self).__name__} used before initialize() was called"
            )
    
    def _validate(self, p: int) -> None:
        """Raise unless p is a valid element id."""
        self._require_initialized()
        if not 0 <= p < self._n:
            raise IndexOutOfRange(f"index {p} is not between 0 and {self._n - 1}")
    
    def __repr__(self) -> str:
        if self._n is None:
            return f"{type(self).__name__}(uninitialized)"
        return f"{type(self).__name__}(size={self._n}, count={self._count})"
