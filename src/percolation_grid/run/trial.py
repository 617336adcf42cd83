"""
Single-trial driver and fill strategy comparison.

A trial opens sites in a random order until the grid percolates and reports
the fraction of open sites at that moment. compare_fills() pushes one open
order through several fill strategies in lockstep, checks that they agree
after every open, and times each of them.
"""

import time
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..errors import FillMismatchError
from ..percolation import FILL_STRATEGIES, Percolation
from ..union_find import DEFAULT_UNION_FIND


@dataclass
class TrialResult:
    """Outcome of one percolation trial."""
    size: int
    fill: str
    open_sites: int
    threshold: float        # open_sites / size^2 when the grid first percolated
    elapsed_seconds: float
    union_find: Optional[str] = None  # Union-find fill only
    
    def to_dict(self) -> Dict:
        return asdict(self)


def random_open_order(size: int, seed: Optional[int] = None) -> np.ndarray:
    """
    Random permutation of every site on a size x size grid.
    
    Args:
        size: Grid size
        seed: Seed for numpy's default_rng (None = fresh entropy)
        
    Returns:
        Array of shape (size*size, 2) with [row, col] per site
    """
    rng = np.random.default_rng(seed)
    flat = rng.permutation(size * size)
    return np.column_stack((flat // size, flat % size))


def run_trial(percolation: Percolation, order: Iterable[Tuple[int, int]],
              union_find_name: Optional[str] = None) -> TrialResult:
    """
    Open sites in order until the grid percolates.
    
    Args:
        percolation: A Percolation instance (normally fully blocked)
        order: Sequence of (row, col) sites to open
        union_find_name: Recorded in the result for union-find fills
        
    Returns:
        TrialResult for this run
        
    Raises:
        ValueError: If the order runs out before the grid percolates
    """
    start_time = time.time()
    
    if not percolation.percolates():
        for row, col in order:
            percolation.open(int(row), int(col))
            if percolation.percolates():
                break
        else:
            raise ValueError(
                f"Open order exhausted after {percolation.number_of_open_sites()} "
                f"sites without percolating"
            )
    
    elapsed = time.time() - start_time
    size = percolation.size
    open_sites = percolation.number_of_open_sites()
    
    return TrialResult(
        size=size,
        fill=percolation.fill_name,
        open_sites=open_sites,
        threshold=open_sites / (size * size),
        elapsed_seconds=elapsed,
        union_find=union_find_name if percolation.fill_name == 'union-find' else None,
    )


def compare_fills(
    size: int,
    fills: Optional[Sequence[str]] = None,
    seed: Optional[int] = None,
    union_find: str = DEFAULT_UNION_FIND,
    verify: bool = True,
) -> pd.DataFrame:
    """
    Run one random open order through several fill strategies in lockstep.
    
    After every open the strategies must agree on percolates() and, when
    verify is set, on the full-site matrix.
    
    Args:
        size: Grid size
        fills: Fill strategy names (default: all registered strategies)
        seed: Seed for the open order
        union_find: Disjoint-set name for the union-find fill
        verify: Compare full-site matrices after every open
        
    Returns:
        DataFrame with one row per fill: size, fill, open_sites, threshold,
        elapsed_seconds, union_find
        
    Raises:
        FillMismatchError: On the first open where two strategies disagree
    """
    if fills is None:
        fills = list(FILL_STRATEGIES)
    if not fills:
        raise ValueError("At least one fill strategy is required")
    
    percs: List[Percolation] = [
        Percolation(size, fill=name, union_find=union_find if name == 'union-find' else None)
        for name in fills
    ]
    timings = [0.0] * len(percs)
    order = random_open_order(size, seed)
    
    for row, col in order:
        row, col = int(row), int(col)
        for i, perc in enumerate(percs):
            start = time.time()
            perc.open(row, col)
            perc.percolates()
            timings[i] += time.time() - start
        
        _check_agreement(percs, row, col, verify)
        if percs[0].percolates():
            break
    
    results = []
    for perc, elapsed in zip(percs, timings):
        open_sites = perc.number_of_open_sites()
        results.append(TrialResult(
            size=size,
            fill=perc.fill_name,
            open_sites=open_sites,
            threshold=open_sites / (size * size),
            elapsed_seconds=elapsed,
            union_find=union_find if perc.fill_name == 'union-find' else None,
        ).to_dict())
    
    return pd.DataFrame(results)


def _check_agreement(percs: List[Percolation], row: int, col: int, verify: bool) -> None:
    reference = percs[0]
    ref_percolates = reference.percolates()
    ref_full = reference.full_sites() if verify else None
    
    for other in percs[1:]:
        if other.percolates() != ref_percolates:
            raise FillMismatchError(
                f"After opening ({row},{col}): {reference.fill_name} and {other.fill_name} "
                f"disagree on percolates() ({ref_percolates} vs {not ref_percolates})"
            )
        if verify:
            diff = np.argwhere(other.full_sites() != ref_full)
            if len(diff) > 0:
                bad_row, bad_col = diff[0]
                raise FillMismatchError(
                    f"After opening ({row},{col}): {reference.fill_name} and "
                    f"{other.fill_name} disagree on is_full({bad_row},{bad_col})"
                )
