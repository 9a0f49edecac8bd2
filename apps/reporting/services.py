"""
Reporting services for the kiosk.

Read-only queries over product and sale state:
- Low stock list and count
- Sales for a calendar day, a time range, a payment method, or the most recent
- Totals per day, per range and per payment method
- Sale count and profit over a range

Calendar days follow the server time zone (``TIME_ZONE``). Ranges are
inclusive at both ends.
"""

import logging
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from django.conf import settings
from django.db.models import DecimalField, ExpressionWrapper, F, QuerySet, Sum
from django.utils import timezone

from apps.inventory.services import InventoryLedger
from apps.sales.models import Sale, SaleItem

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")

PROFIT_EXPRESSION = ExpressionWrapper(
    (F("unit_price") - F("unit_cost")) * F("quantity"),
    output_field=DecimalField(max_digits=12, decimal_places=2),
)


def money(value) -> Decimal:
    """Normalize an aggregate result to a two-place decimal, 0.00 when empty."""
    if value is None:
        return ZERO
    return Decimal(value).quantize(Decimal("0.01"))


def day_bounds(day: Optional[date] = None) -> Tuple[datetime, datetime]:
    """
    First and last instant of a calendar day in the server time zone.

    Args:
        day: The calendar day, today when omitted

    Returns:
        Tuple of aware datetimes (start_of_day, end_of_day)
    """
    day = day or timezone.localdate()
    start = timezone.make_aware(datetime.combine(day, time.min))
    end = timezone.make_aware(datetime.combine(day, time.max))
    return start, end


class SalesReportService:
    """
    Derived views over inventory and sales. Never writes.
    """

    def __init__(self, ledger=InventoryLedger):
        self.ledger = ledger

    # Stock reports
    def low_stock_products(self) -> QuerySet:
        return self.ledger.low_stock_products()

    def low_stock_count(self) -> int:
        return self.ledger.low_stock_count()

    # Sale listings
    def sales_between(self, start: datetime, end: datetime) -> QuerySet:
        """Sales with a timestamp in [start, end]."""
        return Sale.objects.filter(timestamp__range=(start, end)).prefetch_related("items")

    def sales_for_day(self, day: Optional[date] = None) -> QuerySet:
        return self.sales_between(*day_bounds(day))

    def recent_sales(self, limit: Optional[int] = None) -> List[Sale]:
        """Most recent sales, newest first."""
        if limit is None:
            limit = settings.RECENT_SALES_LIMIT
        return list(Sale.objects.order_by("-timestamp", "-id").prefetch_related("items")[:limit])

    def sales_by_payment_method(self, method: str) -> QuerySet:
        return Sale.objects.filter(payment_method=method).prefetch_related("items")

    # Totals
    def total_between(self, start: datetime, end: datetime) -> Decimal:
        total = Sale.objects.filter(timestamp__range=(start, end)).aggregate(total=Sum("total"))[
            "total"
        ]
        return money(total)

    def total_for_day(self, day: Optional[date] = None) -> Decimal:
        return self.total_between(*day_bounds(day))

    def totals_by_payment_method(self, start: datetime, end: datetime) -> List[Dict[str, Any]]:
        """
        Sum of sale totals per payment method within [start, end].

        Returns:
            List of {"payment_method": str, "total": Decimal}
        """
        rows = (
            Sale.objects.filter(timestamp__range=(start, end))
            .values("payment_method")
            .annotate(total=Sum("total"))
            .order_by("payment_method")
        )
        return [
            {"payment_method": row["payment_method"], "total": money(row["total"])}
            for row in rows
        ]

    def count_between(self, start: datetime, end: datetime) -> int:
        return Sale.objects.filter(timestamp__range=(start, end)).count()

    def profit_between(self, start: datetime, end: datetime) -> Decimal:
        """Sum of (unit price - unit cost) * quantity over items sold in [start, end]."""
        profit = SaleItem.objects.filter(sale__timestamp__range=(start, end)).aggregate(
            profit=Sum(PROFIT_EXPRESSION)
        )["profit"]
        return money(profit)

    def summary_between(self, start: datetime, end: datetime) -> Dict[str, Any]:
        """Count, total and profit for [start, end]."""
        summary = {
            "count": self.count_between(start, end),
            "total": self.total_between(start, end),
            "profit": self.profit_between(start, end),
        }
        logger.debug(f"Sales summary {start.isoformat()} .. {end.isoformat()}: {summary}")
        return summary
