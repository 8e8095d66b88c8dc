"""
Lane serializers module.
"""
from .lane_serializers import LaneSerializer, LaneStateSerializer

__all__ = [
    'LaneSerializer',
    'LaneStateSerializer',
]
