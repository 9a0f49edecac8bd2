"""
Serializers for inventory models.
"""

from rest_framework import serializers

from .models import MAX_STOCK, Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for product lists and detail responses."""

    is_low_stock = serializers.BooleanField(read_only=True)
    is_sold_by_weight = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "barcode",
            "sale_price",
            "cost_price",
            "stock",
            "min_stock",
            "category",
            "sale_type",
            "unit_of_measure",
            "min_increment",
            "image_url",
            "is_low_stock",
            "is_sold_by_weight",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductWriteSerializer(serializers.ModelSerializer):
    """
    Structural validation for product create and full update.

    The price rule (sale price above cost price) is enforced by the
    inventory ledger, not here.
    """

    stock = serializers.IntegerField(
        min_value=0, max_value=MAX_STOCK, required=False, allow_null=True
    )
    min_stock = serializers.IntegerField(
        min_value=0, max_value=MAX_STOCK, required=False, allow_null=True
    )
    category = serializers.CharField(
        max_length=100, required=False, allow_blank=True, allow_null=True
    )

    class Meta:
        model = Product
        fields = [
            "name",
            "barcode",
            "sale_price",
            "cost_price",
            "stock",
            "min_stock",
            "category",
            "sale_type",
            "unit_of_measure",
            "min_increment",
            "image_url",
        ]

    def validate_barcode(self, value):
        """Treat a blank barcode as no barcode."""
        if value is not None and not value.strip():
            return None
        return value

    def to_internal_value(self, data):
        # Accept "unit" / "weight" in any case
        if isinstance(data, dict) and isinstance(data.get("sale_type"), str):
            data = {**data, "sale_type": data["sale_type"].upper()}
        return super().to_internal_value(data)


class StockAdjustmentSerializer(serializers.Serializer):
    """
    Signed stock delta.

    Positive values add stock, negative values remove it and zero is a no-op.
    """

    quantity = serializers.IntegerField(min_value=-MAX_STOCK, max_value=MAX_STOCK)
