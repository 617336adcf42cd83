"""Disjoint-set structures used by the union-find fill."""

from functools import partial

from .base import DisjointSet
from .quick_find import QuickFindUF
from .quick_union import QuickUnionUF
from .weighted import WeightedQuickUnionUF

# Zero-argument factories, selectable by name from the CLI and run configs
UNION_FIND_IMPLEMENTATIONS = {
    'quick-find': QuickFindUF,
    'quick-union': QuickUnionUF,
    'weighted': partial(WeightedQuickUnionUF, path_compression=False),
    'weighted-pc': WeightedQuickUnionUF,
}

DEFAULT_UNION_FIND = 'weighted-pc'


def get_union_find(name: str):
    """
    Look up a disjoint-set factory by name.
    
    Args:
        name: One of UNION_FIND_IMPLEMENTATIONS
        
    Returns:
        Zero-argument callable producing an uninitialized DisjointSet
    """
    try:
        return UNION_FIND_IMPLEMENTATIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown union-find implementation '{name}'. "
            f"Available: {sorted(UNION_FIND_IMPLEMENTATIONS)}"
        ) from None


__all__ = [
    'DisjointSet', 'QuickFindUF', 'QuickUnionUF', 'WeightedQuickUnionUF',
    'UNION_FIND_IMPLEMENTATIONS', 'DEFAULT_UNION_FIND', 'get_union_find',
]
