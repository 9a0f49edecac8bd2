"""
Sales models for the kiosk point of sale.

- Sale records with a server-assigned timestamp and payment method
- Line items that snapshot product name, price and cost at sale time
- Totals stored on the sale, profit derived from the item snapshots
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.inventory.models import Product

# Largest amount a DecimalField(max_digits=12, decimal_places=2) can hold
MAX_AMOUNT = Decimal("9999999999.99")


class Sale(models.Model):
    """
    Sale model for tracking point-of-sale transactions.

    The total is the sum of item subtotals at the moment the sale is
    registered and is never set by the client. Deleting a sale deletes its
    items.
    """

    timestamp = models.DateTimeField(
        default=timezone.now,
        editable=False,
        db_index=True,
        help_text="When the sale was registered",
    )

    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Total amount (sum of item subtotals)",
    )

    payment_method = models.CharField(
        max_length=50,
        help_text="Payment method used (e.g., Cash, Card, QR)",
    )

    class Meta:
        db_table = "sales"
        ordering = ["-timestamp", "-id"]
        verbose_name = "Sale"
        verbose_name_plural = "Sales"
        indexes = [
            models.Index(fields=["payment_method", "timestamp"], name="sale_payment_date_idx"),
        ]

    def __str__(self):
        return f"Sale #{self.pk} - {self.total}"

    def calculate_total(self):
        """Sum of item subtotals."""
        return sum((item.subtotal for item in self.items.all()), Decimal("0.00"))

    def profit(self):
        """Profit over cost using the cost captured on each item."""
        return sum((item.profit() for item in self.items.all()), Decimal("0.00"))


class SaleItem(models.Model):
    """
    Sale item model for tracking individual items in a sale.

    Tracks:
    - Which product was sold, with its name at the time of sale
    - Quantity sold
    - Unit price and unit cost at time of sale
    - Subtotal for this line item
    """

    sale = models.ForeignKey(
        Sale,
        on_delete=models.CASCADE,
        related_name="items",
        help_text="Sale that this item belongs to",
    )

    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="sale_items",
        help_text="Product that was sold",
    )

    product_name = models.CharField(
        max_length=255,
        help_text="Product name at time of sale",
    )

    quantity = models.IntegerField(
        validators=[MinValueValidator(1)],
        help_text="Quantity sold",
    )

    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Unit price at time of sale (may differ from current product price)",
    )

    unit_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Unit cost at time of sale",
    )

    subtotal = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Subtotal for this line item (quantity * unit_price)",
    )

    class Meta:
        db_table = "sale_items"
        ordering = ["id"]
        verbose_name = "Sale Item"
        verbose_name_plural = "Sale Items"
        indexes = [
            models.Index(fields=["sale"], name="saleitem_sale_idx"),
            models.Index(fields=["product"], name="saleitem_product_idx"),
        ]

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"

    def save(self, *args, **kwargs):
        """
        Override save to calculate subtotal if not provided.
        """
        if self.subtotal is None:
            self.subtotal = self.calculate_subtotal()
        super().save(*args, **kwargs)

    def calculate_subtotal(self):
        """Calculate and return the subtotal for this item."""
        return self.unit_price * self.quantity

    def profit(self):
        return (self.unit_price - self.unit_cost) * self.quantity

    @classmethod
    def snapshot(cls, sale, product, quantity):
        """Build an unsaved item capturing the product's current name, price and cost."""
        item = cls(
            sale=sale,
            product=product,
            product_name=product.name,
            quantity=quantity,
            unit_price=product.sale_price,
            unit_cost=product.cost_price,
        )
        item.subtotal = item.calculate_subtotal()
        return item
