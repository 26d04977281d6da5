"""
Pytest fixtures for Entryman tests.
"""

from datetime import date, timedelta

import pytest

from entryman.adapters import reset_product_lookup
from entryman.models import Batch
from entryman.tests.catalog.models import Product


@pytest.fixture(autouse=True)
def _fresh_product_lookup():
    """Each test resolves the lookup from its own settings."""
    reset_product_lookup()
    yield
    reset_product_lookup()


@pytest.fixture
def product(db):
    """Create a test product."""
    return Product.objects.create(name='Dipirona 500mg')


@pytest.fixture
def other_product(db):
    """Create a second product."""
    return Product.objects.create(name='Paracetamol 750mg')


@pytest.fixture
def expiry():
    """An expiry date well in the future."""
    return date.today() + timedelta(days=365)


@pytest.fixture
def batch(product, expiry):
    """Existing batch B1 for product with 20 units."""
    return Batch.objects.create(
        product_id=str(product.pk),
        product_name=product.name,
        batch_number='B1',
        stock=20,
        expiry_date=expiry,
    )


@pytest.fixture
def bulk_delete_enabled(settings):
    """Turn ALLOW_BULK_DELETE on for one test."""
    settings.ENTRYMAN = {**settings.ENTRYMAN, 'ALLOW_BULK_DELETE': True}
    return settings
