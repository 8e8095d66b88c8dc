"""
Lane views module.
"""
from .lane_views import LaneImpactView, LaneStateView

__all__ = [
    'LaneImpactView',
    'LaneStateView',
]
