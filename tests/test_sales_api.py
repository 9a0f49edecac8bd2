"""
Tests for the sale API endpoints.
"""

from decimal import Decimal

from django.urls import reverse

import pytest
from rest_framework import status

from apps.sales.models import Sale
from apps.sales.services import SaleService


@pytest.mark.django_db
class TestSaleRegistrationAPI:
    """Test POST /api/sales/."""

    def test_register_sale(self, api_client, product):
        data = {"payment_method": "Cash", "items": {str(product.pk): 2}}

        response = api_client.post(reverse("sales:sale_list"), data, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["total"] == "200.00"
        assert response.data["profit"] == "100.00"
        assert response.data["payment_method"] == "Cash"
        assert len(response.data["items"]) == 1
        assert response.data["items"][0]["product_id"] == product.pk
        assert response.data["items"][0]["unit_price"] == "100.00"
        assert response.data["items"][0]["subtotal"] == "200.00"
        product.refresh_from_db()
        assert product.stock == 3

    def test_client_cannot_set_total_or_timestamp(self, api_client, product):
        data = {
            "payment_method": "Cash",
            "items": {str(product.pk): 1},
            "total": "9999.00",
            "timestamp": "2001-01-01T00:00:00Z",
        }

        response = api_client.post(reverse("sales:sale_list"), data, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["total"] == "100.00"
        assert not response.data["timestamp"].startswith("2001")

    def test_register_sale_insufficient_stock(self, api_client, product):
        data = {"payment_method": "Cash", "items": {str(product.pk): 1000}}

        response = api_client.post(reverse("sales:sale_list"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["product_id"] == product.pk
        assert response.data["product_name"] == "Alfajor"
        assert response.data["available"] == 5
        assert response.data["requested"] == 1000
        assert Sale.objects.count() == 0

    def test_register_sale_empty_cart(self, api_client):
        data = {"payment_method": "Cash", "items": {}}

        response = api_client.post(reverse("sales:sale_list"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "at least one product" in response.data["detail"]

    def test_register_sale_unknown_product(self, api_client):
        data = {"payment_method": "Cash", "items": {"999": 1}}

        response = api_client.post(reverse("sales:sale_list"), data, format="json")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["detail"] == "Product not found with ID: 999"

    def test_register_sale_invalid_product_key(self, api_client):
        data = {"payment_method": "Cash", "items": {"abc": 1}}

        response = api_client.post(reverse("sales:sale_list"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "items" in response.data["errors"]

    def test_register_sale_total_too_large(self, api_client, make_product):
        pricey = make_product(
            name="Pricey", sale_price=Decimal("9999999999.99"), cost_price=Decimal("1.00")
        )
        data = {"payment_method": "Cash", "items": {str(pricey.pk): 2}}

        response = api_client.post(reverse("sales:sale_list"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Sale.objects.count() == 0
        pricey.refresh_from_db()
        assert pricey.stock == 10

    def test_register_sale_quantity_out_of_range(self, api_client, product):
        data = {"payment_method": "Cash", "items": {str(product.pk): 10**19}}

        response = api_client.post(reverse("sales:sale_list"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "items" in response.data["errors"]
        assert Sale.objects.count() == 0

    def test_register_sale_merged_quantity_out_of_range(self, api_client, product):
        key = str(product.pk)
        data = {"payment_method": "Cash", "items": {key: 2147483647, f"0{key}": 1}}

        response = api_client.post(reverse("sales:sale_list"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "items" in response.data["errors"]

    def test_register_sale_missing_payment_method(self, api_client, product):
        data = {"items": {str(product.pk): 1}}

        response = api_client.post(reverse("sales:sale_list"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "payment_method" in response.data["errors"]


@pytest.mark.django_db
class TestSaleReadDeleteAPI:
    """Test sale list, detail and delete."""

    def test_list_sales(self, api_client, product):
        SaleService.register_sale("Cash", {product.pk: 1})
        SaleService.register_sale("QR", {product.pk: 1})

        response = api_client.get(reverse("sales:sale_list"))

        assert response.status_code == status.HTTP_200_OK
        assert [s["payment_method"] for s in response.data] == ["QR", "Cash"]

    def test_get_sale(self, api_client, product):
        sale = SaleService.register_sale("Cash", {product.pk: 1})

        response = api_client.get(reverse("sales:sale_detail", args=[sale.pk]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["id"] == sale.pk
        assert response.data["items"][0]["product_name"] == "Alfajor"

    def test_get_unknown_sale(self, api_client):
        response = api_client.get(reverse("sales:sale_detail", args=[999]))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_sale(self, api_client, product):
        sale = SaleService.register_sale("Cash", {product.pk: 1})

        response = api_client.delete(reverse("sales:sale_detail", args=[sale.pk]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Sale.objects.exists()
