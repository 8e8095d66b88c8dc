"""
Product services module.

All services are exported from this module to maintain backward compatibility.
"""
from .product_service import ProductService

__all__ = [
    'ProductService',
]
