"""Pytest configuration and fixtures"""
import os

import pytest

# Set test environment variables before cartstore.config is imported
os.environ.setdefault("CURRENCY", "USD")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from cartstore.cart import CartStore, Product  # noqa: E402


@pytest.fixture
def store():
    """CartStore seeded with the default catalog."""
    return CartStore()


@pytest.fixture
def sample_products():
    """Two-product catalog: A at 0.25, B at 2."""
    return [
        Product(id=1, name="A", unit_price="0.25", image_ref="a.jpg"),
        Product(id=2, name="B", unit_price=2, image_ref="b.jpg"),
    ]


@pytest.fixture
def sample_store(sample_products):
    """Store over sample_products with A x2 and B x1 in the cart (total 2.5)."""
    store = CartStore(products=sample_products)
    store.add_to_cart(1)
    store.add_to_cart(1)
    store.add_to_cart(2)
    return store
