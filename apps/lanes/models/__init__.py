"""
Lane models module.
"""
from .lane import Lane, default_lane_metrics

__all__ = [
    'Lane',
    'default_lane_metrics',
]
