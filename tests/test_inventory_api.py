"""
Tests for the product API endpoints.
"""

from decimal import Decimal

from django.urls import reverse

import pytest
from rest_framework import status

from apps.inventory.models import Product


@pytest.mark.django_db
class TestProductCRUD:
    """Test product create, read, replace and delete over HTTP."""

    def test_list_products(self, api_client, make_product):
        make_product(name="Cola")
        make_product(name="Chips")

        response = api_client.get(reverse("inventory:product_list"))

        assert response.status_code == status.HTTP_200_OK
        assert [p["name"] for p in response.data] == ["Chips", "Cola"]

    def test_create_product(self, api_client):
        data = {
            "name": "Cola 500ml",
            "barcode": "7790895000997",
            "sale_price": "1.50",
            "cost_price": "0.90",
            "stock": 24,
            "min_stock": 6,
            "category": "Drinks",
        }

        response = api_client.post(reverse("inventory:product_list"), data, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["name"] == "Cola 500ml"
        assert response.data["sale_price"] == "1.50"
        assert response.data["stock"] == 24
        assert response.data["is_low_stock"] is False
        assert Product.objects.get(name="Cola 500ml").barcode == "7790895000997"

    def test_create_product_defaults_stock(self, api_client):
        data = {"name": "Gum", "sale_price": "0.50", "cost_price": "0.20", "sale_type": "weight"}

        response = api_client.post(reverse("inventory:product_list"), data, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["stock"] == 0
        assert response.data["min_stock"] == 0
        assert response.data["sale_type"] == "WEIGHT"
        assert response.data["is_sold_by_weight"] is True

    def test_create_product_invalid_prices(self, api_client):
        data = {"name": "Gum", "sale_price": "0.50", "cost_price": "0.50"}

        response = api_client.post(reverse("inventory:product_list"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["status"] == 400
        assert "greater than cost price" in response.data["detail"]
        assert not Product.objects.exists()

    def test_create_product_missing_fields(self, api_client):
        response = api_client.post(
            reverse("inventory:product_list"), {"sale_price": "1.00"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "name" in response.data["errors"]
        assert "cost_price" in response.data["errors"]

    def test_create_product_duplicate_name(self, api_client, product):
        data = {"name": product.name, "sale_price": "2.00", "cost_price": "1.00"}

        response = api_client.post(reverse("inventory:product_list"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "name" in response.data["errors"]

    def test_get_product(self, api_client, product):
        response = api_client.get(reverse("inventory:product_detail", args=[product.pk]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["id"] == product.pk
        assert response.data["is_low_stock"] is True

    def test_get_unknown_product(self, api_client):
        response = api_client.get(reverse("inventory:product_detail", args=[999]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["detail"] == "Product not found with ID: 999"
        assert response.data["errors"] is None
        assert "timestamp" in response.data

    def test_replace_product(self, api_client, product):
        data = {
            "name": "Alfajor Triple",
            "sale_price": "150.00",
            "cost_price": "70.00",
            "category": "Snacks",
        }

        response = api_client.put(
            reverse("inventory:product_detail", args=[product.pk]), data, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        product.refresh_from_db()
        assert product.name == "Alfajor Triple"
        assert product.sale_price == Decimal("150.00")
        # Omitted stock fields are reset
        assert product.stock == 0
        assert product.min_stock == 0
        assert product.barcode == "7790001000011"

    def test_partial_update_not_allowed(self, api_client, product):
        response = api_client.patch(
            reverse("inventory:product_detail", args=[product.pk]), {"stock": 1}, format="json"
        )

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    def test_delete_product(self, api_client, product):
        response = api_client.delete(reverse("inventory:product_detail", args=[product.pk]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Product.objects.filter(pk=product.pk).exists()


@pytest.mark.django_db
class TestStockAdjustmentAPI:
    """Test the signed stock adjustment endpoint."""

    def test_add_stock(self, api_client, product):
        url = reverse("inventory:adjust_stock", args=[product.pk])

        response = api_client.patch(url, {"quantity": 10}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["stock"] == 15

    def test_remove_stock(self, api_client, product):
        url = reverse("inventory:adjust_stock", args=[product.pk])

        response = api_client.patch(url, {"quantity": -2}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["stock"] == 3

    def test_remove_too_much_stock(self, api_client, product):
        url = reverse("inventory:adjust_stock", args=[product.pk])

        response = api_client.patch(url, {"quantity": -6}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["product_id"] == product.pk
        assert response.data["available"] == 5
        assert response.data["requested"] == 6
        product.refresh_from_db()
        assert product.stock == 5

    @pytest.mark.parametrize("quantity", [10**19, -(10**19), 2147483648])
    def test_quantity_out_of_range(self, api_client, product, quantity):
        url = reverse("inventory:adjust_stock", args=[product.pk])

        response = api_client.patch(url, {"quantity": quantity}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "quantity" in response.data["errors"]
        product.refresh_from_db()
        assert product.stock == 5

    def test_adjustment_overflowing_stock(self, api_client, product):
        url = reverse("inventory:adjust_stock", args=[product.pk])

        response = api_client.patch(url, {"quantity": 2147483647}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        product.refresh_from_db()
        assert product.stock == 5

    def test_missing_quantity(self, api_client, product):
        url = reverse("inventory:adjust_stock", args=[product.pk])

        response = api_client.patch(url, {}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "quantity" in response.data["errors"]


@pytest.mark.django_db
class TestProductLookupAPI:
    """Test search and category endpoints."""

    def test_search_by_category(self, api_client, make_product):
        make_product(name="Cola", category="Drinks")
        make_product(name="Chips", category="Snacks")

        response = api_client.get(
            reverse("inventory:search_by_category"), {"name": "Drinks"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert [p["name"] for p in response.data] == ["Cola"]

    def test_search_by_name(self, api_client, make_product):
        make_product(name="Coca Cola")
        make_product(name="Water")

        response = api_client.get(reverse("inventory:search_by_name"), {"text": "COLA"})

        assert response.status_code == status.HTTP_200_OK
        assert [p["name"] for p in response.data] == ["Coca Cola"]

    def test_search_requires_parameter(self, api_client):
        response = api_client.get(reverse("inventory:search_by_name"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "text" in response.data["errors"]

    def test_lookup_by_barcode(self, api_client, product):
        response = api_client.get(
            reverse("inventory:lookup_by_barcode"), {"code": "7790001000011"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["name"] == "Alfajor"

    def test_lookup_unknown_barcode(self, api_client):
        response = api_client.get(reverse("inventory:lookup_by_barcode"), {"code": "nope"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_categories(self, api_client, make_product):
        make_product(category="Snacks")
        make_product(category="Drinks")
        make_product(category="Snacks")

        response = api_client.get(reverse("inventory:category_list"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == ["Drinks", "Snacks"]
