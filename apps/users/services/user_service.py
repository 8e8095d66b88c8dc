"""
User lookup service.
"""
import logging

from apps.common.exceptions import InvalidInput, NotFound
from ..models import User

logger = logging.getLogger(__name__)


class UserService:
    """Read access to user profiles"""

    @staticmethod
    def find_by_email(email):
        """Fetch a user by email (case-insensitive)"""
        if not email or not str(email).strip():
            raise InvalidInput('Email is required')

        user = User.objects.filter(email__iexact=str(email).strip()).first()
        if user is None:
            logger.info(f"User lookup miss for {email}")
            raise NotFound('User not found')
        return user
