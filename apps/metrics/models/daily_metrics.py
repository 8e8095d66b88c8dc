from django.db import models

COUNTER_FIELDS = ('bursts', 'wins', 'purchases', 'redemptions', 'referrals')


class DailyMetrics(models.Model):
    """Activity counters for one calendar day"""
    # Local calendar date; unique so each day has exactly one row
    date = models.DateField(unique=True)
    bursts = models.PositiveIntegerField(default=0)
    wins = models.PositiveIntegerField(default=0)
    purchases = models.PositiveIntegerField(default=0)
    redemptions = models.PositiveIntegerField(default=0)
    referrals = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'daily_metrics'
        ordering = ['date']
        verbose_name = 'Daily Metrics'
        verbose_name_plural = 'Daily Metrics'

    def __str__(self):
        return f"Metrics {self.date.isoformat()}"

    def counters(self):
        return {field: getattr(self, field) for field in COUNTER_FIELDS}
