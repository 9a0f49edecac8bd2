"""
URL configuration for reporting app.
"""

from django.urls import path

from . import views

app_name = "reporting"

urlpatterns = [
    # Stock reports
    path("api/reports/low-stock/", views.low_stock_products, name="low_stock"),
    path("api/reports/low-stock/count/", views.low_stock_count, name="low_stock_count"),
    # Sale listings
    path("api/reports/sales/daily/", views.sales_for_day, name="sales_daily"),
    path("api/reports/sales/range/", views.sales_between, name="sales_range"),
    path("api/reports/sales/recent/", views.recent_sales, name="sales_recent"),
    path(
        "api/reports/sales/payment-method/",
        views.sales_by_payment_method,
        name="sales_by_payment_method",
    ),
    # Totals
    path("api/reports/totals/daily/", views.total_for_day, name="total_daily"),
    path("api/reports/totals/range/", views.total_between, name="total_range"),
    path(
        "api/reports/totals/payment-methods/",
        views.totals_by_payment_method,
        name="totals_by_payment_method",
    ),
    path("api/reports/summary/", views.sales_summary, name="summary"),
]
