"""
Inventory models for kiosk product management.

- Products with unique names and optional unique barcodes
- Sale and cost prices stored as fixed-point decimals
- Stock quantity with a minimum threshold for low stock alerts
- Unit or weight based sale types
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.core.exceptions import InsufficientStockError, InvalidArgumentError

# Largest value every supported database accepts in an IntegerField
MAX_STOCK = 2147483647


class Product(models.Model):
    """
    A sellable product and its current stock level.

    Stock only changes through ``add_stock`` and ``remove_stock`` so that the
    quantity on hand never goes negative.
    """

    UNIT = "UNIT"
    WEIGHT = "WEIGHT"

    SALE_TYPE_CHOICES = [
        (UNIT, "Unit"),
        (WEIGHT, "Weight"),
    ]

    name = models.CharField(
        max_length=255,
        unique=True,
        help_text="Product name (e.g., 'Cola 500ml')",
    )

    barcode = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        unique=True,
        help_text="Barcode for quick scanning",
    )

    # Pricing
    sale_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Sale price (what we charge)",
    )

    cost_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Cost price (what we paid)",
    )

    # Inventory tracking
    stock = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Current quantity in stock",
    )

    min_stock = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Minimum quantity threshold for low stock alerts",
    )

    category = models.CharField(
        max_length=100,
        blank=True,
        default="",
        help_text="Product category (e.g., Drinks, Snacks)",
    )

    # Unit or weight based selling
    sale_type = models.CharField(
        max_length=10,
        choices=SALE_TYPE_CHOICES,
        default=UNIT,
        help_text="Whether the product is sold per unit or by weight",
    )

    unit_of_measure = models.CharField(
        max_length=20,
        default="unit",
        help_text="Unit label shown at the counter (e.g., unit, kg)",
    )

    min_increment = models.DecimalField(
        max_digits=10,
        decimal_places=3,
        default=Decimal("1.000"),
        validators=[MinValueValidator(Decimal("0.001"))],
        help_text="Smallest quantity step that can be sold",
    )

    image_url = models.URLField(
        max_length=500,
        blank=True,
        default="",
        help_text="Optional product image URL",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inventory_products"
        ordering = ["name"]
        verbose_name = "Product"
        verbose_name_plural = "Products"
        indexes = [
            models.Index(fields=["category"], name="product_category_idx"),
            models.Index(fields=["stock", "min_stock"], name="product_low_stock_idx"),
        ]

    def __str__(self):
        return self.name

    def is_low_stock(self):
        """Check if stock is below the minimum threshold."""
        return self.stock < self.min_stock

    def is_sold_by_weight(self):
        return (self.sale_type or "").upper() == self.WEIGHT

    def remove_stock(self, quantity):
        """
        Decrement stock in memory.

        Args:
            quantity: Amount to remove

        Raises:
            InsufficientStockError: If quantity exceeds the stock on hand
        """
        if quantity > self.stock:
            raise InsufficientStockError(
                product_id=self.pk,
                product_name=self.name,
                available=self.stock,
                requested=quantity,
            )
        self.stock -= quantity

    def add_stock(self, quantity):
        """
        Increment stock in memory.

        Raises:
            InvalidArgumentError: If quantity is not positive or the result would
                exceed MAX_STOCK
        """
        if quantity <= 0:
            raise InvalidArgumentError("Quantity to add must be greater than zero")
        if self.stock + quantity > MAX_STOCK:
            raise InvalidArgumentError(f"Stock for product {self.name} cannot exceed {MAX_STOCK}")
        self.stock += quantity
