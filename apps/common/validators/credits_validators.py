"""
Credit-related validators.
"""
from rest_framework import serializers


def validate_credits_amount(value):
    """
    Validate a requested credit count.

    Args:
        value: Credits integer

    Raises:
        serializers.ValidationError: If the credit count is negative

    Returns:
        int: Validated credit count
    """
    if value < 0:
        raise serializers.ValidationError("Credits applied cannot be negative.")

    return value
