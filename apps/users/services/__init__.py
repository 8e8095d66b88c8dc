"""
User services module.
"""
from .user_service import UserService

__all__ = [
    'UserService',
]
