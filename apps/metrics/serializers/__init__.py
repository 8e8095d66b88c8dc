"""
Metrics serializers module.
"""
from .metrics_serializers import DailyMetricsSerializer, MetricsSummarySerializer

__all__ = [
    'DailyMetricsSerializer',
    'MetricsSummarySerializer',
]
