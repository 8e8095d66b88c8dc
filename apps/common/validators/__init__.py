"""
Common validators module.

All validators are exported from this module to maintain backward compatibility.
"""
from .credits_validators import validate_credits_amount
from .price_validators import validate_money_amount

__all__ = [
    'validate_credits_amount',
    'validate_money_amount',
]
