"""
Lane serializers for the admin lane console.
"""
from rest_framework import serializers
from ..models import Lane


class LaneSerializer(serializers.ModelSerializer):
    impactScore = serializers.FloatField(source='impact_score', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Lane
        fields = ['id', 'name', 'description', 'impactScore', 'state', 'metrics', 'createdAt', 'updatedAt']
        read_only_fields = fields


class LaneStateSerializer(serializers.Serializer):
    """
    Body of POST /api/admin/lanes/<id>/state.
    The value itself is checked by LaneService so invalid states map to InvalidState.
    """
    state = serializers.CharField(required=False, allow_blank=True, default='')
