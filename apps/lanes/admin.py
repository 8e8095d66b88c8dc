from django.contrib import admin
from .models import Lane


@admin.register(Lane)
class LaneAdmin(admin.ModelAdmin):
    list_display = ['name', 'impact_score', 'state', 'updated_at']
    list_filter = ['state']
    search_fields = ['name', 'description']
    ordering = ['-impact_score']
    readonly_fields = ['created_at', 'updated_at']
