from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """User admin with credit balance and admin flag"""
    list_display = ['username', 'name', 'email', 'credits', 'is_admin', 'is_staff', 'created_at']
    list_filter = ['is_admin', 'is_staff', 'is_active', 'created_at']
    search_fields = ['username', 'name', 'email']
    ordering = ['-created_at']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Store Profile', {
            'fields': ('name', 'credits', 'is_admin')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    # Balance changes go through redemption settlement so the ledger stays complete
    readonly_fields = ['credits', 'created_at', 'updated_at']
