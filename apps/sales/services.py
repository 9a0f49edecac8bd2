"""
Sale engine.

Registers a multi-item sale as one unit of work. Every product in the cart is
locked up front in id order, then each line item consumes stock through the
inventory ledger primitive and snapshots the current price. Any failure rolls back every stock change made by the call
and no sale is stored.
"""

import logging
from decimal import Decimal

from django.db import transaction

from apps.core.exceptions import (
    InsufficientStockError,
    InvalidArgumentError,
    NotFoundError,
)
from apps.inventory.services import InventoryLedger

from .models import MAX_AMOUNT, Sale, SaleItem

logger = logging.getLogger(__name__)


class SaleService:
    """
    Service for registering, reading and deleting sales.
    """

    @staticmethod
    def register_sale(payment_method, line_items):
        """
        Register a sale and consume stock for every line item.

        Args:
            payment_method: Free-text payment tag (e.g., "Cash")
            line_items: Mapping of product id to quantity, processed in
                iteration order

        Returns:
            Sale: The persisted sale with its items

        Raises:
            InvalidArgumentError: Empty cart, non-positive quantity, or a
                total that is non-positive or above MAX_AMOUNT
            NotFoundError: Unknown product id
            InsufficientStockError: Quantity above the stock on hand
        """
        try:
            sale = SaleService._register(payment_method, line_items)
        except (InvalidArgumentError, InsufficientStockError, NotFoundError) as e:
            logger.warning(f"Sale rejected ({payment_method}): {e.message}")
            raise

        logger.info(
            f"Sale registered: #{sale.pk} ({sale.payment_method}) "
            f"total={sale.total}, items={len(line_items)}"
        )
        return sale

    @staticmethod
    @transaction.atomic
    def _register(payment_method, line_items):
        if not line_items:
            raise InvalidArgumentError("A sale must have at least one product")

        for product_id, quantity in line_items.items():
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
                raise InvalidArgumentError(
                    f"Quantity for product {product_id} must be a positive integer"
                )

        sale = Sale(payment_method=payment_method, total=Decimal("0.00"))
        items = []

        # Lock in id order, then consume stock in the order given
        locked = InventoryLedger.lock_many(list(line_items))
        for product_id, quantity in line_items.items():
            product = locked.get(product_id)
            if product is None:
                raise NotFoundError.for_resource("Product", product_id)
            product.remove_stock(quantity)
            product.save(update_fields=["stock", "updated_at"])
            items.append(SaleItem.snapshot(sale, product, quantity))

        total = sum((item.subtotal for item in items), Decimal("0.00"))
        if total <= 0:
            raise InvalidArgumentError("Sale total must be greater than zero")
        if total > MAX_AMOUNT:
            raise InvalidArgumentError(f"Sale total cannot exceed {MAX_AMOUNT}")

        sale.total = total
        sale.save()
        for item in items:
            item.sale = sale
        SaleItem.objects.bulk_create(items)

        return sale

    @staticmethod
    def get(sale_id):
        try:
            return Sale.objects.prefetch_related("items").get(pk=sale_id)
        except Sale.DoesNotExist:
            raise NotFoundError.for_resource("Sale", sale_id)

    @staticmethod
    def list_all():
        """All sales, newest first."""
        return Sale.objects.prefetch_related("items")

    @staticmethod
    @transaction.atomic
    def delete(sale_id):
        """
        Delete a sale and its items.

        Stock consumed by the sale is not restored.
        """
        try:
            sale = Sale.objects.select_for_update().get(pk=sale_id)
        except Sale.DoesNotExist:
            raise NotFoundError.for_resource("Sale", sale_id)
        sale.delete()
        logger.info(f"Sale deleted: #{sale_id}")
