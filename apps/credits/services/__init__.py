"""
Credits services module.

All services are exported from this module to maintain backward compatibility.
"""
from .pricing_engine import PricingEngine, CreditQuote
from .credit_service import CreditService

__all__ = [
    'PricingEngine',
    'CreditQuote',
    'CreditService',
]
