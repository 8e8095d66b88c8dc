"""
User serializers for profile lookup.
"""
from rest_framework import serializers
from ..models import User


class UserProfileSerializer(serializers.ModelSerializer):
    """
    Serializer for the public user profile.
    Used for: GET /api/user/profile
    Note: Does not include password, username or permission fields.
    """
    isAdmin = serializers.BooleanField(source='is_admin', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'credits', 'isAdmin', 'createdAt', 'updatedAt']
        read_only_fields = fields
