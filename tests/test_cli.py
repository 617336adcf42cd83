"""Tests for the command-line interface."""

import pandas as pd
import yaml
from click.testing import CliRunner

from percolation_grid.cli.main import cli


class TestTrialCommand:
    """Tests for `percolation-grid trial`."""
    
    def test_trial(self):
        result = CliRunner().invoke(cli, ['trial', '--size', '10', '--fill', 'dfs', '--seed', '1'])
        
        assert result.exit_code == 0, result.output
        assert 'Threshold:' in result.output
        assert 'Fill:       dfs' in result.output
    
    def test_trial_union_find(self):
        result = CliRunner().invoke(
            cli, ['trial', '-n', '8', '-f', 'union-find', '-u', 'quick-union', '-s', '2']
        )
        
        assert result.exit_code == 0, result.output
        assert 'union-find (quick-union)' in result.output
    
    def test_invalid_size(self):
        result = CliRunner().invoke(cli, ['trial', '--size', '0'])
        
        assert result.exit_code != 0
        assert 'Grid size must be >= 1' in result.output
    
    def test_unknown_fill(self):
        result = CliRunner().invoke(cli, ['trial', '--size', '4', '--fill', 'magic'])
        
        assert result.exit_code != 0


class TestCompareCommand:
    """Tests for `percolation-grid compare`."""
    
    def test_compare_size(self, tmp_path):
        output = tmp_path / 'results' / 'compare.csv'
        result = CliRunner().invoke(
            cli, ['compare', '--size', '6', '--seed', '3', '--output', str(output)]
        )
        
        assert result.exit_code == 0, result.output
        assert 'Percolated after' in result.output
        df = pd.read_csv(output)
        assert list(df['fill']) == ['dfs-recompute', 'dfs', 'bfs', 'union-find']
    
    def test_compare_config(self, tmp_path):
        config_path = tmp_path / 'run.yaml'
        config_path.write_text(yaml.safe_dump({
            'run_name': 'cli_run',
            'size': 5,
            'fills': ['dfs', 'union-find'],
            'seed': 11,
        }))
        
        result = CliRunner().invoke(cli, ['compare', '--config', str(config_path), '-f', 'bfs', '-f', 'dfs'])
        
        assert result.exit_code == 0, result.output
        assert '=== cli_run ===' in result.output
        assert 'Fills: bfs, dfs' in result.output
    
    def test_compare_requires_size_or_config(self):
        result = CliRunner().invoke(cli, ['compare'])
        
        assert result.exit_code != 0
        assert 'Provide --config or --size' in result.output
    
    def test_compare_bad_config(self, tmp_path):
        config_path = tmp_path / 'run.yaml'
        config_path.write_text(yaml.safe_dump({'size': 4, 'union_find': 'fast'}))
        
        result = CliRunner().invoke(cli, ['compare', '--config', str(config_path)])
        
        assert result.exit_code != 0
        assert 'Invalid run config' in result.output


class TestListCommand:
    
    def test_list(self):
        result = CliRunner().invoke(cli, ['list'])
        
        assert result.exit_code == 0
        assert 'bfs (default)' in result.output
        assert 'weighted-pc (default)' in result.output
