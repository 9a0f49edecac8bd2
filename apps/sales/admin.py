"""
Django admin configuration for sales models.
"""

from django.contrib import admin

from .models import Sale, SaleItem


class SaleItemInline(admin.TabularInline):
    """Inline admin for SaleItem model."""

    model = SaleItem
    extra = 0
    can_delete = False
    fields = ["product", "product_name", "quantity", "unit_price", "unit_cost", "subtotal"]
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    """Admin interface for Sale model."""

    list_display = ["id", "timestamp", "payment_method", "total"]
    list_filter = ["payment_method", "timestamp"]
    search_fields = ["payment_method"]
    readonly_fields = ["timestamp", "total", "payment_method"]
    date_hierarchy = "timestamp"
    inlines = [SaleItemInline]

    def has_add_permission(self, request):
        return False
