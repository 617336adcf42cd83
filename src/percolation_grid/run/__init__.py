"""Trial driver, fill comparison and run configuration."""

from .config import RunConfig
from .trial import TrialResult, random_open_order, run_trial, compare_fills

__all__ = ['RunConfig', 'TrialResult', 'random_open_order', 'run_trial', 'compare_fills']
