"""
Admin lane console views.
"""
from rest_framework.views import APIView
from rest_framework.response import Response

from apps.common.identity import require_admin_if_identified
from ..serializers import LaneSerializer, LaneStateSerializer
from ..services import LaneService


class LaneImpactView(APIView):
    """Lanes by impact - GET /api/admin/lanes/impact"""

    def get(self, request):
        require_admin_if_identified(request, request.query_params.get('email'))

        lanes = LaneService.list_by_impact_descending()
        return Response(LaneSerializer(lanes, many=True).data)


class LaneStateView(APIView):
    """Lane state change - POST /api/admin/lanes/<id>/state"""

    def post(self, request, lane_id):
        require_admin_if_identified(request, request.data.get('email') or request.query_params.get('email'))

        serializer = LaneStateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        lane = LaneService.transition_state(lane_id, serializer.validated_data['state'])
        return Response(LaneSerializer(lane).data)
