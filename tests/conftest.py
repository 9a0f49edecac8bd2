"""
Pytest configuration and fixtures for the kiosk backend.
"""

from decimal import Decimal

import pytest


@pytest.fixture
def api_client():
    """
    Fixture for Django REST framework API client.
    """
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def make_product(db):
    """
    Factory fixture for products with sensible defaults.
    """
    from apps.inventory.models import Product

    def _make_product(**overrides):
        fields = {
            "name": f"Product {Product.objects.count() + 1}",
            "sale_price": Decimal("100.00"),
            "cost_price": Decimal("50.00"),
            "stock": 10,
            "min_stock": 2,
            "category": "General",
        }
        fields.update(overrides)
        return Product.objects.create(**fields)

    return _make_product


@pytest.fixture
def product(make_product):
    """Low stock product: stock 5 below a minimum of 10."""
    return make_product(
        name="Alfajor",
        barcode="7790001000011",
        sale_price=Decimal("100.00"),
        cost_price=Decimal("50.00"),
        stock=5,
        min_stock=10,
        category="Snacks",
    )
