"""
Timing helpers for reporting trial and comparison durations.
"""

from typing import Optional


def format_duration(seconds: Optional[float]) -> str:
    """Format duration in seconds to human-readable string."""
    if seconds is None:
        return 'N/A'
    
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        minutes = seconds / 60
        return f"{minutes:.1f}m"
    else:
        hours = seconds / 3600
        return f"{hours:.2f}h"


def speedup(baseline_seconds: float, seconds: float) -> Optional[float]:
    """Ratio baseline/seconds, or None when either duration is not positive."""
    if baseline_seconds <= 0 or seconds <= 0:
        return None
    return baseline_seconds / seconds
