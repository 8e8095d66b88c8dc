"""
Metrics views module.
"""
from .admin_metrics_views import AdminMetricsView

__all__ = [
    'AdminMetricsView',
]
