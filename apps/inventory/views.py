"""
Views for inventory management.

- Product list, create, detail, full update and delete
- Signed stock adjustment
- Lookup by category, name fragment and barcode
- Distinct category listing
"""

from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.core.exceptions import ValidationFailedError

from .serializers import ProductSerializer, ProductWriteSerializer, StockAdjustmentSerializer
from .services import InventoryLedger


def required_query_param(request, name):
    """Return a query parameter or fail validation when it is missing."""
    value = request.query_params.get(name)
    if value is None:
        raise ValidationFailedError({name: "This query parameter is required."})
    return value


class ProductListCreateView(generics.ListCreateAPIView):
    """
    API endpoint for listing products and creating new ones.
    """

    serializer_class = ProductSerializer
    permission_classes = [permissions.AllowAny]

    def get_queryset(self):
        return InventoryLedger.list_all()

    def create(self, request, *args, **kwargs):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = InventoryLedger.create(serializer.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


class ProductDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for retrieving, replacing and deleting a single product.

    PUT is a full replace of the core fields; partial updates are not offered.
    """

    serializer_class = ProductSerializer
    permission_classes = [permissions.AllowAny]
    http_method_names = ["get", "put", "delete", "head", "options"]

    def get_object(self):
        return InventoryLedger.get(self.kwargs["pk"])

    def update(self, request, *args, **kwargs):
        product = self.get_object()
        serializer = ProductWriteSerializer(product, data=request.data)
        serializer.is_valid(raise_exception=True)
        product = InventoryLedger.update(product.pk, serializer.validated_data)
        return Response(ProductSerializer(product).data)

    def destroy(self, request, *args, **kwargs):
        InventoryLedger.delete(self.kwargs["pk"])
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["PATCH"])
@permission_classes([permissions.AllowAny])
def adjust_stock(request, pk):
    """
    API endpoint for adjusting stock levels.

    Request body:
    {
        "quantity": <signed integer>
    }
    """
    serializer = StockAdjustmentSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    product = InventoryLedger.adjust_stock(pk, serializer.validated_data["quantity"])
    return Response(ProductSerializer(product).data)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def search_by_category(request):
    name = required_query_param(request, "name")
    products = InventoryLedger.find_by_category(name)
    return Response(ProductSerializer(products, many=True).data)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def search_by_name(request):
    text = required_query_param(request, "text")
    products = InventoryLedger.find_by_name_substring(text)
    return Response(ProductSerializer(products, many=True).data)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def lookup_by_barcode(request):
    """
    API endpoint for looking up a product by barcode.

    Used by the counter scanner.
    """
    code = required_query_param(request, "code")
    product = InventoryLedger.find_by_barcode(code)
    return Response(ProductSerializer(product).data)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def category_list(request):
    return Response(InventoryLedger.categories())
