"""
Run configuration for trials and fill comparisons.

The RunConfig loads a YAML run definition, for example:

    run_name: compare_64
    size: 64
    fills: [dfs-recompute, dfs, bfs, union-find]
    union_find: weighted-pc
    seed: 42
    output_csv: results/compare_64.csv
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..percolation import FILL_STRATEGIES
from ..percolation.grid import check_size
from ..union_find import DEFAULT_UNION_FIND, UNION_FIND_IMPLEMENTATIONS


class RunConfig:
    """
    Loads and validates a run configuration.
    
    Example:
        config = RunConfig.from_yaml('config/compare_64.yaml')
        print(config.size, config.fills)
    """
    
    def __init__(self, data: Dict[str, Any]):
        if not isinstance(data, dict):
            raise ValueError("Run config must be a mapping")
        self._data = data
        self._validate()
    
    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")
        
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        
        return cls(data or {})
    
    def _validate(self):
        """Validate required keys and known names."""
        if 'size' not in self._data:
            raise ValueError("Missing required config key: 'size'")
        check_size(self._data['size'])
        
        unknown = [f for f in self.fills if f not in FILL_STRATEGIES]
        if unknown:
            raise ValueError(
                f"Unknown fill strategies {unknown}. Available: {sorted(FILL_STRATEGIES)}"
            )
        if self.union_find not in UNION_FIND_IMPLEMENTATIONS:
            raise ValueError(
                f"Unknown union-find implementation '{self.union_find}'. "
                f"Available: {sorted(UNION_FIND_IMPLEMENTATIONS)}"
            )
        
        seed = self._data.get('seed')
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ValueError(f"seed must be an integer, got {seed!r}")
    
    # --- Properties ---
    
    @property
    def run_name(self) -> str:
        return self._data.get('run_name', f"size_{self.size}")
    
    @property
    def size(self) -> int:
        return int(self._data['size'])
    
    @property
    def fills(self) -> List[str]:
        fills = self._data.get('fills')
        if fills is None:
            return list(FILL_STRATEGIES)
        if isinstance(fills, str):
            return [fills]
        return list(fills)
    
    @property
    def union_find(self) -> str:
        return self._data.get('union_find', DEFAULT_UNION_FIND)
    
    @property
    def seed(self) -> Optional[int]:
        return self._data.get('seed')
    
    @property
    def output_csv(self) -> Optional[Path]:
        output = self._data.get('output_csv')
        return Path(output) if output else None
    
    def with_overrides(self, **overrides) -> 'RunConfig':
        """Copy of this config with non-None overrides applied."""
        data = dict(self._data)
        data.update({k: v for k, v in overrides.items() if v is not None})
        return RunConfig(data)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'run_name': self.run_name,
            'size': self.size,
            'fills': self.fills,
            'union_find': self.union_find,
            'seed': self.seed,
            'output_csv': str(self.output_csv) if self.output_csv else None,
        }
