"""
Test configuration for the merch server.
"""
import pytest
from decimal import Decimal


@pytest.fixture
def api_client():
    """DRF test client without credentials."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def regular_user():
    """Non-admin user with 1250 credits."""
    from tests.factories import UserFactory
    return UserFactory(email='maya@example.com', credits=1250)


@pytest.fixture
def admin_user():
    """Admin user with 5000 credits."""
    from tests.factories import AdminUserFactory
    return AdminUserFactory(email='admin@example.com')


@pytest.fixture
def t_shirt():
    """Product priced at 24.99."""
    from tests.factories import ProductFactory
    return ProductFactory(name='T-Shirt', price=Decimal('24.99'))


@pytest.fixture
def hoodie():
    """Product priced at 49.99."""
    from tests.factories import ProductFactory
    return ProductFactory(name='Hoodie', price=Decimal('49.99'))
