"""
Metrics services module.
"""
from .metrics_service import MetricsService

__all__ = [
    'MetricsService',
]
