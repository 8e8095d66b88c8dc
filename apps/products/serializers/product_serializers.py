"""
Product serializers for catalog responses.
"""
from rest_framework import serializers
from ..models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for catalog entries - GET /api/merch/catalog"""
    inStock = serializers.BooleanField(source='in_stock', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Product
        fields = ['id', 'name', 'description', 'price', 'image', 'inStock', 'createdAt']
        read_only_fields = fields
