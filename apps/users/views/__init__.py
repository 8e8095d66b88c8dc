"""
User views module.

All views are exported from this module to maintain backward compatibility.
"""
from .profile_views import UserProfileView

__all__ = [
    'UserProfileView',
]
