"""
Product serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .product_serializers import ProductSerializer

__all__ = [
    'ProductSerializer',
]
