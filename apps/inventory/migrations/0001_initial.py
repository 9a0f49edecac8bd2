# Initial schema for the inventory ledger

from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        help_text="Product name (e.g., 'Cola 500ml')",
                        max_length=255,
                        unique=True,
                    ),
                ),
                (
                    "barcode",
                    models.CharField(
                        blank=True,
                        help_text="Barcode for quick scanning",
                        max_length=100,
                        null=True,
                        unique=True,
                    ),
                ),
                (
                    "sale_price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Sale price (what we charge)",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "cost_price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Cost price (what we paid)",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "stock",
                    models.IntegerField(
                        default=0,
                        help_text="Current quantity in stock",
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "min_stock",
                    models.IntegerField(
                        default=0,
                        help_text="Minimum quantity threshold for low stock alerts",
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Product category (e.g., Drinks, Snacks)",
                        max_length=100,
                    ),
                ),
                (
                    "sale_type",
                    models.CharField(
                        choices=[("UNIT", "Unit"), ("WEIGHT", "Weight")],
                        default="UNIT",
                        help_text="Whether the product is sold per unit or by weight",
                        max_length=10,
                    ),
                ),
                (
                    "unit_of_measure",
                    models.CharField(
                        default="unit",
                        help_text="Unit label shown at the counter (e.g., unit, kg)",
                        max_length=20,
                    ),
                ),
                (
                    "min_increment",
                    models.DecimalField(
                        decimal_places=3,
                        default=Decimal("1.000"),
                        help_text="Smallest quantity step that can be sold",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.001"))],
                    ),
                ),
                (
                    "image_url",
                    models.URLField(
                        blank=True,
                        default="",
                        help_text="Optional product image URL",
                        max_length=500,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Product",
                "verbose_name_plural": "Products",
                "db_table": "inventory_products",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["category"], name="product_category_idx"),
                    models.Index(fields=["stock", "min_stock"], name="product_low_stock_idx"),
                ],
            },
        ),
    ]
