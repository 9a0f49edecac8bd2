"""
Serializers for sales models.
"""

from rest_framework import serializers

from apps.inventory.models import MAX_STOCK

from .models import Sale, SaleItem


class SaleItemSerializer(serializers.ModelSerializer):
    """Serializer for SaleItem model."""

    product_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = SaleItem
        fields = [
            "id",
            "product_id",
            "product_name",
            "quantity",
            "unit_price",
            "unit_cost",
            "subtotal",
        ]
        read_only_fields = fields


class SaleSerializer(serializers.ModelSerializer):
    """Serializer for a sale with its line items."""

    items = SaleItemSerializer(many=True, read_only=True)
    profit = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = Sale
        fields = [
            "id",
            "timestamp",
            "payment_method",
            "total",
            "profit",
            "items",
        ]
        read_only_fields = fields


class SaleCreateSerializer(serializers.Serializer):
    """
    Serializer for registering a new sale through the POS.

    Request body:
    {
        "payment_method": "Cash",
        "items": {"<product id>": <quantity>, ...}
    }

    Item order is preserved. Cart emptiness and quantity rules are checked
    by the sale engine.
    """

    payment_method = serializers.CharField(max_length=50)
    items = serializers.DictField(
        child=serializers.IntegerField(min_value=-MAX_STOCK, max_value=MAX_STOCK),
        allow_empty=True,
    )

    def validate_items(self, value):
        """Convert product id keys to integers, keeping their order."""
        items = {}
        for key, quantity in value.items():
            try:
                product_id = int(key)
            except (TypeError, ValueError):
                raise serializers.ValidationError(f"Invalid product id: {key}")
            items[product_id] = items.get(product_id, 0) + quantity
            if abs(items[product_id]) > MAX_STOCK:
                raise serializers.ValidationError(
                    f"Quantity for product {product_id} cannot exceed {MAX_STOCK}"
                )
        return items
