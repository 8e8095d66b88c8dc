"""
Credits models module.

All models are exported from this module to maintain backward compatibility.
"""
from .credit_transaction import CreditTransaction

__all__ = [
    'CreditTransaction',
]
