"""
Test factories for creating test data using factory_boy.
"""
import factory
from factory.django import DjangoModelFactory
from factory import Faker
from decimal import Decimal
from django.contrib.auth import get_user_model
from django.utils import timezone

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """Factory for creating store users."""

    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f"testuser{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    name = Faker('name')
    credits = 1250
    is_admin = False
    is_active = True


class AdminUserFactory(UserFactory):
    """Factory for users carrying the admin flag."""
    username = factory.Sequence(lambda n: f"admin{n}")
    credits = 5000
    is_admin = True


class ProductFactory(DjangoModelFactory):
    """Factory for creating catalog products."""

    class Meta:
        model = 'products.Product'

    name = factory.Sequence(lambda n: f"Test Product {n}")
    description = Faker('text', max_nb_chars=200)
    price = Decimal('24.99')
    image = factory.Sequence(lambda n: f"https://example.com/images/product-{n}.png")
    in_stock = True


class LaneFactory(DjangoModelFactory):
    """Factory for creating lanes."""

    class Meta:
        model = 'lanes.Lane'

    name = factory.Sequence(lambda n: f"Lane {n}")
    description = factory.LazyAttribute(lambda obj: f"Description for {obj.name}")
    impact_score = Faker('pyfloat', min_value=0, max_value=99)
    state = 'ok'
    metrics = factory.LazyFunction(lambda: {'users': 250, 'engagement': 40, 'retention': 60})


class DailyMetricsFactory(DjangoModelFactory):
    """Factory for one day of metrics counters."""

    class Meta:
        model = 'metrics.DailyMetrics'
        django_get_or_create = ('date',)

    date = factory.LazyFunction(timezone.localdate)
    bursts = 600
    wins = 80
    purchases = 30
    redemptions = 15
    referrals = 7
