"""
Metrics models module.
"""
from .daily_metrics import DailyMetrics, COUNTER_FIELDS

__all__ = [
    'DailyMetrics',
    'COUNTER_FIELDS',
]
