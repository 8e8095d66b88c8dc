"""
Catalog views.
"""
from rest_framework.views import APIView
from rest_framework.response import Response

from ..serializers import ProductSerializer
from ..services import ProductService


class CatalogView(APIView):
    """In-stock merchandise - GET /api/merch/catalog"""

    def get(self, request):
        products = ProductService.list_catalog()
        return Response(ProductSerializer(products, many=True).data)
