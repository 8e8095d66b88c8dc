"""
Order services module.

All services are exported from this module to maintain backward compatibility.
"""
from .redemption_service import RedemptionService, SettlementResult

__all__ = [
    'RedemptionService',
    'SettlementResult',
]
