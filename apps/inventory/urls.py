"""
URL configuration for inventory app.
"""

from django.urls import path

from . import views

app_name = "inventory"

urlpatterns = [
    # Product endpoints
    path("api/products/", views.ProductListCreateView.as_view(), name="product_list"),
    path("api/products/<int:pk>/", views.ProductDetailView.as_view(), name="product_detail"),
    path("api/products/<int:pk>/stock/", views.adjust_stock, name="adjust_stock"),
    # Lookup endpoints
    path(
        "api/products/search/category/",
        views.search_by_category,
        name="search_by_category",
    ),
    path("api/products/search/name/", views.search_by_name, name="search_by_name"),
    path(
        "api/products/search/barcode/",
        views.lookup_by_barcode,
        name="lookup_by_barcode",
    ),
    path("api/products/categories/", views.category_list, name="category_list"),
]
