"""
Price and money amount validators.
"""
from rest_framework import serializers


def validate_money_amount(value):
    """
    Validate a client-submitted currency amount (cash payment).

    Args:
        value: Amount decimal

    Raises:
        serializers.ValidationError: If the amount is negative

    Returns:
        decimal.Decimal: Validated amount
    """
    if value < 0:
        raise serializers.ValidationError("Amount cannot be negative.")

    return value
