"""
Admin metrics views.
"""
from rest_framework.views import APIView
from rest_framework.response import Response

from apps.common.identity import require_admin
from ..serializers import MetricsSummarySerializer
from ..services import MetricsService


class AdminMetricsView(APIView):
    """Aggregated metrics - GET /api/admin/metrics?since=...&email=..."""

    def get(self, request):
        require_admin(request, request.query_params.get('email'))

        summary = MetricsService.aggregate_since(request.query_params.get('since'))
        return Response(MetricsSummarySerializer(summary).data)
