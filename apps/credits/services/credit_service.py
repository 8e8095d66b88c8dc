"""
Credit service for balance changes.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import F

from apps.common.exceptions import InvalidInput, InsufficientCredits
from ..models import CreditTransaction

logger = logging.getLogger(__name__)


class CreditService:
    """Service for handling credit balance operations"""

    @staticmethod
    @transaction.atomic
    def debit(user, amount, description="", reference_id=None):
        """
        Take credits from a user's balance and record the ledger entry.

        The balance is decremented with a conditional UPDATE so concurrent
        debits can never push it below zero; when the guard fails nothing
        is written.

        Args:
            user: User instance (refreshed in place with the new balance)
            amount: Credits to take (>= 0; zero still records an entry)
            description: Ledger description
            reference_id: Order id or other reference

        Raises:
            InvalidInput: Negative amount
            InsufficientCredits: Stored balance is lower than amount

        Returns:
            CreditTransaction: The ledger entry
        """
        if amount < 0:
            raise InvalidInput('Credits applied cannot be negative')

        User = get_user_model()
        updated = User.objects.filter(pk=user.pk, credits__gte=amount).update(
            credits=F('credits') - amount
        )
        if updated == 0:
            logger.warning(f"Credit debit of {amount} refused for user {user.pk}")
            raise InsufficientCredits()

        user.refresh_from_db(fields=['credits'])

        return CreditTransaction.objects.create(
            user=user,
            transaction_type='redemption',
            amount=-amount,
            balance_after=user.credits,
            description=description,
            reference_id=reference_id
        )
