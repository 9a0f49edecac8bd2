"""
Inventory ledger service.

Owns Product records and the stock invariant: stock is never negative and
only changes through ``Product.add_stock`` / ``Product.remove_stock``.
Mutations run in a transaction with the product row locked.
"""

import logging

from django.db import transaction
from django.db.models import F, ProtectedError

from apps.core.exceptions import InsufficientStockError, InvalidArgumentError, NotFoundError

from .models import Product

logger = logging.getLogger(__name__)

REPLACED_FIELDS = ("name", "sale_price", "cost_price", "stock", "min_stock", "category")

FIELD_DEFAULTS = {"stock": 0, "min_stock": 0, "category": ""}


class InventoryLedger:
    """
    Product catalogue and stock operations.
    """

    @staticmethod
    def get(product_id):
        try:
            return Product.objects.get(pk=product_id)
        except Product.DoesNotExist:
            raise NotFoundError.for_resource("Product", product_id)

    @staticmethod
    def get_for_update(product_id):
        """
        Fetch a product with its row locked until the current transaction ends.

        Must be called inside ``transaction.atomic``.
        """
        try:
            return Product.objects.select_for_update().get(pk=product_id)
        except Product.DoesNotExist:
            raise NotFoundError.for_resource("Product", product_id)

    @staticmethod
    def lock_many(product_ids):
        """
        Lock several products in primary key order.

        Concurrent callers acquire row locks in the same order whatever order
        they list the ids in. Unknown ids are simply absent from the result.
        Must be called inside ``transaction.atomic``.

        Returns:
            dict: Product id to locked Product
        """
        products = Product.objects.select_for_update().filter(pk__in=product_ids).order_by("pk")
        return {product.pk: product for product in products}

    @staticmethod
    def list_all():
        return Product.objects.all()

    @staticmethod
    def find_by_category(name):
        return Product.objects.filter(category=name)

    @staticmethod
    def find_by_name_substring(text):
        return Product.objects.filter(name__icontains=text)

    @staticmethod
    def find_by_barcode(code):
        try:
            return Product.objects.get(barcode=code)
        except Product.DoesNotExist:
            raise NotFoundError(f"Product not found with barcode: {code}")

    @staticmethod
    def validate_prices(sale_price, cost_price):
        """Sale price must be strictly greater than cost price."""
        if sale_price is None or cost_price is None:
            raise InvalidArgumentError("Sale price and cost price are required")
        if sale_price <= cost_price:
            raise InvalidArgumentError("Sale price must be greater than cost price")

    @staticmethod
    def create(draft):
        """
        Create a product from validated field values.

        Args:
            draft: Mapping of product fields; stock fields default to 0

        Returns:
            Product: The persisted product

        Raises:
            InvalidArgumentError: If sale price is not above cost price
        """
        InventoryLedger.validate_prices(draft.get("sale_price"), draft.get("cost_price"))

        fields = dict(draft)
        for field, default in FIELD_DEFAULTS.items():
            if fields.get(field) is None:
                fields[field] = default

        product = Product.objects.create(**fields)
        logger.info(f"Product created: {product.name} (id={product.pk}, stock={product.stock})")
        return product

    @staticmethod
    @transaction.atomic
    def update(product_id, draft):
        """
        Replace the core fields of a product.

        Name, prices, stock, minimum stock and category are overwritten.
        Stock fields missing from the draft are reset to 0 and a missing
        category is cleared. Barcode, sale type, unit of measure, minimum
        increment and image URL are left unchanged.

        Raises:
            NotFoundError: If the product does not exist
            InvalidArgumentError: If sale price is not above cost price
        """
        product = InventoryLedger.get_for_update(product_id)
        InventoryLedger.validate_prices(draft.get("sale_price"), draft.get("cost_price"))

        for field in REPLACED_FIELDS:
            value = draft.get(field)
            if value is None:
                value = FIELD_DEFAULTS.get(field)
            setattr(product, field, value)

        product.save()
        logger.info(f"Product updated: {product.name} (id={product.pk}, stock={product.stock})")
        return product

    @staticmethod
    @transaction.atomic
    def delete(product_id):
        """
        Delete a product.

        Raises:
            NotFoundError: If the product does not exist
            InvalidArgumentError: If recorded sales still reference the product
        """
        product = InventoryLedger.get_for_update(product_id)
        try:
            product.delete()
        except ProtectedError:
            raise InvalidArgumentError(
                f"Product {product.name} has recorded sales and cannot be deleted"
            )
        logger.info(f"Product deleted: {product.name} (id={product_id})")

    @staticmethod
    @transaction.atomic
    def adjust_stock(product_id, delta):
        """
        Apply a signed stock delta.

        A positive delta adds stock, a negative delta removes ``abs(delta)``
        and zero leaves the product untouched.

        Raises:
            NotFoundError: If the product does not exist
            InsufficientStockError: If removing more than the stock on hand
        """
        product = InventoryLedger.get_for_update(product_id)
        if delta == 0:
            return product

        previous = product.stock
        if delta > 0:
            product.add_stock(delta)
        else:
            try:
                product.remove_stock(abs(delta))
            except InsufficientStockError:
                logger.warning(
                    f"Stock adjustment rejected for {product.name} (id={product.pk}): "
                    f"available {product.stock}, requested {abs(delta)}"
                )
                raise

        product.save(update_fields=["stock", "updated_at"])
        logger.info(
            f"Stock adjusted for {product.name} (id={product.pk}): "
            f"{previous} -> {product.stock} ({delta:+d})"
        )
        return product

    @staticmethod
    def low_stock_products():
        return Product.objects.filter(stock__lt=F("min_stock"))

    @staticmethod
    def low_stock_count():
        return InventoryLedger.low_stock_products().count()

    @staticmethod
    def low_stock_products_in_category(name):
        return InventoryLedger.low_stock_products().filter(category=name)

    @staticmethod
    def count_in_category(name):
        return Product.objects.filter(category=name).count()

    @staticmethod
    def categories():
        """Distinct categories in lexicographic order."""
        return list(
            Product.objects.order_by("category")
            .values_list("category", flat=True)
            .distinct()
        )
