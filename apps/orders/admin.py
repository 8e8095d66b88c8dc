from django.contrib import admin
from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'product', 'credits_applied', 'cash_payment', 'total', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['user__email', 'product__name', 'idempotency_key']

    def has_add_permission(self, request):
        return False  # Orders are created by settlement

    def has_change_permission(self, request, obj=None):
        return False  # Settled orders are immutable
