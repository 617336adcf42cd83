"""Tests for run configuration."""

from pathlib import Path

import pytest
import yaml

from percolation_grid.errors import InvalidSize
from percolation_grid.run.config import RunConfig


def _write_config(tmp_path: Path, data) -> Path:
    path = tmp_path / "run.yaml"
    path.write_text(yaml.safe_dump(data))
    return path


class TestRunConfig:
    """Tests for RunConfig loading and validation."""
    
    def test_defaults(self):
        config = RunConfig({'size': 16})
        
        assert config.size == 16
        assert config.fills == ['dfs-recompute', 'dfs', 'bfs', 'union-find']
        assert config.union_find == 'weighted-pc'
        assert config.seed is None
        assert config.output_csv is None
        assert config.run_name == 'size_16'
    
    def test_from_yaml(self, tmp_path):
        path = _write_config(tmp_path, {
            'run_name': 'compare_small',
            'size': 8,
            'fills': ['bfs', 'union-find'],
            'union_find': 'quick-union',
            'seed': 7,
            'output_csv': str(tmp_path / 'out.csv'),
        })
        
        config = RunConfig.from_yaml(str(path))
        
        assert config.run_name == 'compare_small'
        assert config.fills == ['bfs', 'union-find']
        assert config.union_find == 'quick-union'
        assert config.seed == 7
        assert config.output_csv == tmp_path / 'out.csv'
    
    def test_single_fill_string(self):
        assert RunConfig({'size': 4, 'fills': 'dfs'}).fills == ['dfs']
    
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RunConfig.from_yaml(str(tmp_path / 'missing.yaml'))
    
    def test_missing_size(self, tmp_path):
        path = _write_config(tmp_path, {'fills': ['bfs']})
        
        with pytest.raises(ValueError, match="size"):
            RunConfig.from_yaml(str(path))
    
    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        
        with pytest.raises(ValueError):
            RunConfig.from_yaml(str(path))
    
    def test_invalid_size(self):
        with pytest.raises(InvalidSize):
            RunConfig({'size': 0})
    
    def test_unknown_fill(self):
        with pytest.raises(ValueError, match="Unknown fill"):
            RunConfig({'size': 4, 'fills': ['bfs', 'magic']})
    
    def test_unknown_union_find(self):
        with pytest.raises(ValueError, match="Unknown union-find"):
            RunConfig({'size': 4, 'union_find': 'fast'})
    
    def test_bad_seed(self):
        with pytest.raises(ValueError, match="seed"):
            RunConfig({'size': 4, 'seed': 'abc'})
    
    def test_with_overrides(self):
        config = RunConfig({'size': 4, 'seed': 1})
        
        updated = config.with_overrides(size=9, seed=None, fills=['dfs'])
        
        assert updated.size == 9
        assert updated.seed == 1
        assert updated.fills == ['dfs']
        assert config.size == 4
    
    def test_to_dict(self):
        data = RunConfig({'size': 5, 'seed': 3}).to_dict()
        
        assert data['size'] == 5
        assert data['seed'] == 3
        assert data['output_csv'] is None
