"""
Order serializers.
"""
from rest_framework import serializers
from ..models import Order


class OrderSerializer(serializers.ModelSerializer):
    """Settled order as returned by POST /api/merch/redeem"""
    productId = serializers.IntegerField(source='product_id', read_only=True)
    userId = serializers.IntegerField(source='user_id', read_only=True)
    creditsApplied = serializers.IntegerField(source='credits_applied', read_only=True)
    creditValue = serializers.DecimalField(source='credit_value', max_digits=12, decimal_places=4, read_only=True)
    cashPayment = serializers.DecimalField(source='cash_payment', max_digits=12, decimal_places=4, read_only=True)
    idempotencyKey = serializers.CharField(source='idempotency_key', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'userId', 'productId', 'creditsApplied', 'creditValue', 'cashPayment',
            'subtotal', 'shipping', 'tax', 'total', 'status', 'idempotencyKey', 'createdAt'
        ]
        read_only_fields = fields
