"""
Service errors and the DRF exception handler that renders them.

Services raise ServiceError subclasses; views let them propagate and the
handler turns every error into a ``{"message": ...}`` body.
"""
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
from rest_framework.exceptions import ValidationError
import logging

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for business errors raised by service layers"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Request failed'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ServiceError):
    """Missing or malformed request fields"""
    default_message = 'Invalid input'


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Resource not found'


class InsufficientCredits(ServiceError):
    default_message = 'Not enough credits'


class PaymentMismatch(ServiceError):
    default_message = 'Invalid cash payment amount'


class InvalidState(ServiceError):
    default_message = 'Invalid state'


class IdempotencyConflict(ServiceError):
    """Idempotency key reused for a different redemption"""
    status_code = status.HTTP_409_CONFLICT
    default_message = 'Idempotency key already used for a different request'


class Unauthorized(ServiceError):
    """Caller lacks the admin flag required by the route"""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = 'Admin access required'


class Internal(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = 'Server error'


def _first_error_message(detail):
    """Flatten a DRF validation detail into a single readable line"""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_error_message(value)
            if field == 'non_field_errors':
                return message
            return f"{field}: {message}"
    if isinstance(detail, list) and detail:
        return _first_error_message(detail[0])
    return str(detail)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    if isinstance(exc, ServiceError):
        if exc.status_code >= 500:
            logger.error(f"Service failure: {exc}", exc_info=True)
            return Response({'message': Internal.default_message}, status=exc.status_code)
        logger.info(f"{type(exc).__name__}: {exc.message}")
        return Response({'message': exc.message}, status=exc.status_code)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is None:
        # Unexpected error: log details, keep them out of the response
        logger.error(f"Unhandled API exception: {exc}", exc_info=True)
        return Response(
            {'message': Internal.default_message},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, ValidationError):
        message = _first_error_message(exc.detail)
    elif isinstance(response.data, dict) and 'detail' in response.data:
        message = str(response.data['detail'])
    else:
        message = 'An error occurred'

    if response.status_code >= 500:
        logger.error(f"API Exception: {exc}", exc_info=True)
        message = Internal.default_message

    response.data = {'message': message}
    return response
