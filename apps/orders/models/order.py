from django.db import models
from django.conf import settings


def money_field(help_text):
    # Four places keep the unrounded tax and credit coverage figures exact
    return models.DecimalField(max_digits=12, decimal_places=4, help_text=help_text)


class Order(models.Model):
    """Settled merchandise redemption"""

    STATUS_PENDING = 'pending'
    STATUS_COMPLETED = 'completed'
    STATUS_CANCELLED = 'cancelled'

    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='orders')
    product = models.ForeignKey('products.Product', on_delete=models.PROTECT, related_name='orders')

    credits_applied = models.PositiveIntegerField(default=0)
    credit_value = money_field("Dollar value covered by credits")
    cash_payment = money_field("Server-computed cash due")
    subtotal = money_field("Product price at settlement time")
    shipping = money_field("Flat shipping fee")
    tax = money_field("Tax on the subtotal")
    total = money_field("Subtotal + shipping + tax, before credits")

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    idempotency_key = models.CharField(
        max_length=128, null=True, blank=True,
        help_text="Client key making a retried settlement return the original order"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user'], name='orders_user_idx'),
            models.Index(fields=['status'], name='orders_status_idx'),
            models.Index(fields=['created_at'], name='orders_created_idx'),
        ]
        constraints = [
            models.UniqueConstraint(fields=['user', 'idempotency_key'], name='uniq_order_user_idempotency_key'),
        ]

    def __str__(self):
        return f"Order {self.pk} ({self.status})"
