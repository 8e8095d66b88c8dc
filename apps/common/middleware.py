"""
Middleware that keeps API failures in the JSON error format
"""

import logging
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Error handling middleware that prevents information leakage.

    DRF views are already covered by the exception handler; this catches
    whatever escapes outside of them (URL resolution, other middleware).
    """

    def process_exception(self, request, exception):
        """Handle exceptions securely"""
        logger.error(f"Exception in {request.path}: {str(exception)}", exc_info=True)

        if request.path.startswith('/api/'):
            return JsonResponse({'message': 'Server error'}, status=500)

        return None  # Let Django handle non-API errors normally

    def process_response(self, request, response):
        """Return JSON for unknown API routes instead of the HTML 404 page"""
        if (
            response.status_code == 404
            and request.path.startswith('/api/')
            and not response.get('Content-Type', '').startswith('application/json')
        ):
            return JsonResponse({'message': 'Resource not found'}, status=404)
        return response
