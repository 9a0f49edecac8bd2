"""
Views for the reporting endpoints.

- Low stock list and count
- Sales by day, range, payment method and most recent
- Totals by day, range and payment method
- Count, total and profit summary over a range
"""

from rest_framework import permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.inventory.serializers import ProductSerializer
from apps.sales.serializers import SaleSerializer

from .serializers import (
    DateRangeQuerySerializer,
    DayQuerySerializer,
    PaymentMethodQuerySerializer,
    PaymentMethodTotalSerializer,
    SalesSummarySerializer,
)
from .services import SalesReportService


def parse_query(serializer_class, request):
    serializer = serializer_class(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def low_stock_products(request):
    products = SalesReportService().low_stock_products()
    return Response(ProductSerializer(products, many=True).data)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def low_stock_count(request):
    return Response({"count": SalesReportService().low_stock_count()})


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def sales_for_day(request):
    """
    Sales registered on a calendar day.

    Query parameters:
    - date: YYYY-MM-DD (optional, defaults to today)
    """
    params = parse_query(DayQuerySerializer, request)
    sales = SalesReportService().sales_for_day(params.get("date"))
    return Response(SaleSerializer(sales, many=True).data)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def sales_between(request):
    """
    Sales registered within a time range.

    Query parameters:
    - start: ISO-8601 datetime
    - end: ISO-8601 datetime
    """
    params = parse_query(DateRangeQuerySerializer, request)
    sales = SalesReportService().sales_between(params["start"], params["end"])
    return Response(SaleSerializer(sales, many=True).data)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def recent_sales(request):
    sales = SalesReportService().recent_sales()
    return Response(SaleSerializer(sales, many=True).data)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def sales_by_payment_method(request):
    params = parse_query(PaymentMethodQuerySerializer, request)
    sales = SalesReportService().sales_by_payment_method(params["method"])
    return Response(SaleSerializer(sales, many=True).data)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def total_for_day(request):
    params = parse_query(DayQuerySerializer, request)
    total = SalesReportService().total_for_day(params.get("date"))
    return Response({"total": str(total)})


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def total_between(request):
    params = parse_query(DateRangeQuerySerializer, request)
    total = SalesReportService().total_between(params["start"], params["end"])
    return Response({"total": str(total)})


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def totals_by_payment_method(request):
    params = parse_query(DateRangeQuerySerializer, request)
    rows = SalesReportService().totals_by_payment_method(params["start"], params["end"])
    return Response(PaymentMethodTotalSerializer(rows, many=True).data)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def sales_summary(request):
    """
    Count, total and profit of sales within a time range.

    Query parameters:
    - start: ISO-8601 datetime
    - end: ISO-8601 datetime
    """
    params = parse_query(DateRangeQuerySerializer, request)
    summary = SalesReportService().summary_between(params["start"], params["end"])
    return Response(SalesSummarySerializer(summary).data)
