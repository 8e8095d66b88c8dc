"""
User profile views.
"""
from rest_framework.views import APIView
from rest_framework.response import Response

from apps.common.identity import resolve_caller
from ..serializers import UserProfileSerializer


class UserProfileView(APIView):
    """Profile lookup - GET /api/user/profile?email=..."""

    def get(self, request):
        user = resolve_caller(request, request.query_params.get('email'))
        return Response(UserProfileSerializer(user).data)
