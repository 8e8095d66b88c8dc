"""
Order serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .order_serializers import OrderSerializer
from .redemption_serializers import (
    QuoteRequestSerializer, QuoteSerializer, RedeemRequestSerializer
)

__all__ = [
    'OrderSerializer',
    'QuoteRequestSerializer',
    'QuoteSerializer',
    'RedeemRequestSerializer',
]
