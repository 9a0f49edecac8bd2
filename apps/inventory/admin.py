"""
Admin configuration for inventory models.
"""

from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product."""

    list_display = [
        "name",
        "barcode",
        "category",
        "sale_price",
        "cost_price",
        "stock",
        "min_stock",
        "low_stock",
        "sale_type",
    ]
    list_filter = ["category", "sale_type", "created_at"]
    search_fields = ["name", "barcode", "category"]
    readonly_fields = ["created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("name", "barcode", "category", "image_url"),
            },
        ),
        (
            "Pricing",
            {
                "fields": ("sale_price", "cost_price"),
            },
        ),
        (
            "Stock",
            {
                "fields": (
                    "stock",
                    "min_stock",
                    "sale_type",
                    "unit_of_measure",
                    "min_increment",
                ),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    @admin.display(boolean=True, description="Low stock")
    def low_stock(self, obj):
        return obj.is_low_stock()
