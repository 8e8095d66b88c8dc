"""
Merch redemption views.
"""
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from apps.common.identity import resolve_caller
from ..serializers import (
    OrderSerializer, QuoteRequestSerializer, QuoteSerializer, RedeemRequestSerializer
)
from ..services import RedemptionService


@api_view(['POST'])
def merch_quote(request):
    """Get a purchase quote applying user credits"""
    serializer = QuoteRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    user = resolve_caller(request, data.get('email'))
    product, quote = RedemptionService.quote(user, data['productId'], data['creditsApplied'])

    return Response(QuoteSerializer({'product': product, **quote.as_dict()}).data)


@api_view(['POST'])
def redeem_merch(request):
    """Redeem a product using credits and cash"""
    serializer = RedeemRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    user = resolve_caller(request, data.get('email'))
    idempotency_key = request.headers.get('Idempotency-Key') or data.get('idempotencyKey')

    result = RedemptionService.settle(
        user=user,
        product_id=data['productId'],
        credits_requested=data['creditsApplied'],
        cash_payment=data['cashPayment'],
        idempotency_key=idempotency_key or None,
    )

    return Response({
        'message': 'Order completed successfully',
        'order': OrderSerializer(result.order).data,
        'remainingCredits': result.remaining_credits,
    }, status=status.HTTP_200_OK if result.replayed else status.HTTP_201_CREATED)
