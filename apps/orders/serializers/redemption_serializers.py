"""
Redemption serializers for quote and redeem requests.
"""
from rest_framework import serializers
from apps.common.validators import validate_credits_amount, validate_money_amount
from apps.products.serializers import ProductSerializer


class QuoteRequestSerializer(serializers.Serializer):
    """
    Serializer for quote requests.
    Used for: POST /api/merch/quote
    """
    productId = serializers.CharField(
        error_messages={'required': 'Product ID is required'},
        help_text="Product to price"
    )
    creditsApplied = serializers.IntegerField(
        required=False,
        default=0,
        validators=[validate_credits_amount],
        help_text="Credits the user wants to apply"
    )
    email = serializers.EmailField(
        required=False,
        help_text="Acting user when no bearer token is sent"
    )


class RedeemRequestSerializer(QuoteRequestSerializer):
    """
    Serializer for redemption requests.
    Used for: POST /api/merch/redeem
    """
    creditsApplied = serializers.IntegerField(
        validators=[validate_credits_amount],
        error_messages={'required': 'Credits applied is required'},
        help_text="Credits to apply"
    )
    # Client figures can carry float noise, so no fixed precision here
    cashPayment = serializers.DecimalField(
        max_digits=None,
        decimal_places=None,
        validators=[validate_money_amount],
        error_messages={'required': 'Cash payment is required'},
        help_text="Cash amount the client expects to pay"
    )
    idempotencyKey = serializers.CharField(
        required=False,
        allow_blank=True,
        max_length=128,
        help_text="Optional key; alternatively sent as the Idempotency-Key header"
    )


class QuoteSerializer(serializers.Serializer):
    """Serializer for the quote response"""
    product = ProductSerializer()
    subtotal = serializers.DecimalField(max_digits=None, decimal_places=None)
    shipping = serializers.DecimalField(max_digits=None, decimal_places=None)
    tax = serializers.DecimalField(max_digits=None, decimal_places=None)
    total = serializers.DecimalField(max_digits=None, decimal_places=None)
    creditsApplied = serializers.IntegerField(source='credits_applied')
    creditValue = serializers.DecimalField(source='credit_value', max_digits=None, decimal_places=None)
    cashPayment = serializers.DecimalField(source='cash_payment', max_digits=None, decimal_places=None)
    maxCreditsUsable = serializers.IntegerField(source='max_credits_usable')
