"""
Metrics serializers for the admin dashboard.
"""
from rest_framework import serializers
from ..models import DailyMetrics


class DailyMetricsSerializer(serializers.ModelSerializer):
    """One day of counters in the history list"""

    class Meta:
        model = DailyMetrics
        fields = ['date', 'bursts', 'wins', 'purchases', 'redemptions', 'referrals']
        read_only_fields = fields


class MetricsSummarySerializer(serializers.Serializer):
    """Totals since a date plus the per-day history"""
    bursts = serializers.IntegerField()
    wins = serializers.IntegerField()
    purchases = serializers.IntegerField()
    redemptions = serializers.IntegerField()
    referrals = serializers.IntegerField()
    history = DailyMetricsSerializer(many=True)
