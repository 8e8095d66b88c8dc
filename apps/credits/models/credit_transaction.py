from django.conf import settings
from django.db import models


class CreditTransaction(models.Model):
    """Append-only ledger of credit balance movements"""
    TRANSACTION_TYPES = [
        ('redemption', 'Credits Redeemed'),
    ]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='credit_transactions')
    transaction_type = models.CharField(max_length=20, choices=TRANSACTION_TYPES)
    amount = models.IntegerField()  # Negative for spending
    balance_after = models.PositiveIntegerField()  # User balance after this transaction
    description = models.CharField(max_length=200, blank=True)
    reference_id = models.CharField(max_length=100, blank=True, null=True)  # Order ID, etc.
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'credit_transactions'
        ordering = ['-created_at', '-id']
        verbose_name = 'Credit Transaction'
        verbose_name_plural = 'Credit Transactions'

    def __str__(self):
        return f"{self.user} - {self.amount} credits ({self.get_transaction_type_display()})"
