from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Store customer or admin holding a loyalty credit balance"""
    name = models.CharField(max_length=150)
    email = models.EmailField(unique=True)
    # Only changed through CreditService.debit; the column itself refuses negatives
    credits = models.PositiveIntegerField(default=0)
    is_admin = models.BooleanField(default=False, help_text="Grants access to the admin metrics and lane console")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.name or self.email or f"User {self.id}"

    def has_credits(self, amount):
        """Check if the stored balance covers the given credit count"""
        return 0 <= amount <= self.credits
