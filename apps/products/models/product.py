from django.core.validators import MinValueValidator
from django.db import models


class InStockProductManager(models.Manager):
    """Products currently offered in the catalog"""

    def get_queryset(self):
        return super().get_queryset().filter(in_stock=True)


class Product(models.Model):
    """Merchandise item redeemable with credits and cash"""
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text="Price in currency units; the only price settlement trusts"
    )
    image = models.URLField(max_length=500, blank=True, default='')
    in_stock = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = models.Manager()
    in_stock_items = InStockProductManager()

    class Meta:
        db_table = 'products'
        ordering = ['id']
        indexes = [
            models.Index(fields=['in_stock'], name='products_in_stock_idx'),
        ]

    def __str__(self):
        return f"{self.name} (id: {self.id})"
