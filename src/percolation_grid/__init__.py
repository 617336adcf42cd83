"""
Percolation Grid - connectivity tracking for site percolation on an N x N grid.

This package provides:
- A percolation facade with interchangeable fill strategies (DFS, BFS, union-find)
- Disjoint-set structures (quick-find, quick-union, weighted with path compression)
- A single-trial driver and a strategy comparison runner
- A command-line interface for running trials from the shell
"""

__version__ = "1.0.0"
