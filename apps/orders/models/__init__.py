"""
Order models module.

All models are exported from this module to maintain backward compatibility.
"""
from .order import Order

__all__ = [
    'Order',
]
