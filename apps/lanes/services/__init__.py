"""
Lane services module.
"""
from .lane_service import LaneService

__all__ = [
    'LaneService',
]
