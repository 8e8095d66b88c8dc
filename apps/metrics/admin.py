from django.contrib import admin
from .models import DailyMetrics


@admin.register(DailyMetrics)
class DailyMetricsAdmin(admin.ModelAdmin):
    list_display = ['date', 'bursts', 'wins', 'purchases', 'redemptions', 'referrals', 'updated_at']
    list_filter = ['date']
    date_hierarchy = 'date'
    readonly_fields = ['created_at', 'updated_at']
