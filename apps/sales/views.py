"""
Views for sales and POS functionality.

- Sale registration with atomic stock consumption
- Sale list (newest first) and detail
- Sale deletion
"""

from rest_framework import generics, permissions, status
from rest_framework.response import Response

from .serializers import SaleCreateSerializer, SaleSerializer
from .services import SaleService


class SaleListCreateView(generics.ListCreateAPIView):
    """
    API endpoint for listing sales and registering new ones.

    POST body:
    {
        "payment_method": "Cash",
        "items": {"12": 2, "7": 1}
    }

    Items are processed in the order given. The first item that fails
    (unknown product or insufficient stock) determines the error and no
    stock is consumed.
    """

    serializer_class = SaleSerializer
    permission_classes = [permissions.AllowAny]

    def get_queryset(self):
        return SaleService.list_all()

    def create(self, request, *args, **kwargs):
        serializer = SaleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        sale = SaleService.register_sale(
            serializer.validated_data["payment_method"],
            serializer.validated_data["items"],
        )
        return Response(SaleSerializer(sale).data, status=status.HTTP_201_CREATED)


class SaleDetailView(generics.RetrieveDestroyAPIView):
    """
    API endpoint for retrieving or deleting a single sale.

    Deleting a sale removes its items; consumed stock is not returned.
    """

    serializer_class = SaleSerializer
    permission_classes = [permissions.AllowAny]

    def get_object(self):
        return SaleService.get(self.kwargs["pk"])

    def destroy(self, request, *args, **kwargs):
        SaleService.delete(self.kwargs["pk"])
        return Response(status=status.HTTP_204_NO_CONTENT)
