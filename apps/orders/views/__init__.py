"""
Order views module.

All views are exported from this module to maintain backward compatibility.
"""
from .redemption_views import merch_quote, redeem_merch

__all__ = [
    'merch_quote',
    'redeem_merch',
]
