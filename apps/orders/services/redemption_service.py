"""
Redemption service: quotes and settlement of credit-discounted purchases.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from apps.common.exceptions import IdempotencyConflict, InvalidInput, InsufficientCredits, PaymentMismatch
from apps.common.utils import parse_positive_int
from apps.credits.services import CreditService, CreditQuote, PricingEngine
from apps.metrics.services import MetricsService
from apps.products.models import Product
from apps.products.services import ProductService
from ..models import Order

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')


@dataclass
class SettlementResult:
    order: Order
    remaining_credits: int
    replayed: bool = False


class RedemptionService:
    """Service class for credit redemption business logic"""

    @staticmethod
    def _check_credits(user, credits_requested: int) -> None:
        if credits_requested < 0:
            raise InvalidInput('Credits applied cannot be negative')
        if not user.has_credits(credits_requested):
            raise InsufficientCredits()

    @staticmethod
    def quote(user, product_id, credits_requested: int) -> Tuple[Product, CreditQuote]:
        """
        Non-binding quote for the acting user.

        Raises:
            InsufficientCredits: credits_requested exceeds the stored balance
            NotFound: Product does not exist
        """
        RedemptionService._check_credits(user, credits_requested)
        product = ProductService.get_product(product_id)

        quote = PricingEngine.from_settings().quote(product.price, credits_requested, user.credits)
        return product, quote

    @staticmethod
    def _replay(user, order: Order, product_id, credits_requested: int) -> SettlementResult:
        """
        Result of an earlier settlement made with the same idempotency key.

        Raises:
            IdempotencyConflict: The key was used for a different product or credit count
        """
        if order.product_id != parse_positive_int(product_id) or order.credits_applied != credits_requested:
            logger.warning(
                f"Idempotency key {order.idempotency_key} reused by user {user.pk} "
                f"for product {product_id} with {credits_requested} credits"
            )
            raise IdempotencyConflict()
        user.refresh_from_db(fields=['credits'])
        logger.info(f"Replaying settlement {order.idempotency_key} for user {user.pk}: order {order.pk}")
        return SettlementResult(order=order, remaining_credits=user.credits, replayed=True)

    @staticmethod
    def _find_replay(user, idempotency_key: Optional[str], product_id,
                     credits_requested: int) -> Optional[SettlementResult]:
        if not idempotency_key:
            return None
        order = Order.objects.filter(user=user, idempotency_key=idempotency_key).first()
        if order is None:
            return None
        return RedemptionService._replay(user, order, product_id, credits_requested)

    @staticmethod
    def settle(user, product_id, credits_requested: int, cash_payment,
               idempotency_key: Optional[str] = None) -> SettlementResult:
        """
        Settle a redemption: order insert, credit debit and metrics update.

        The quote is recomputed from the stored product price and balance;
        the only client figure used is cash_payment, and only for comparison.
        The three writes share one transaction, so a failure in any of them
        leaves no order, no debit and no metrics change.

        Args:
            user: Acting user (already resolved from the request)
            product_id: Product to redeem
            credits_requested: Credits to apply
            cash_payment: Cash amount the client expects to pay
            idempotency_key: Optional client key; a repeat returns the first result

        Raises:
            InsufficientCredits: Balance lower than credits_requested, including
                when a concurrent settlement spent the credits first
            IdempotencyConflict: idempotency_key was already used for a different
                product or credit count
            NotFound: Product does not exist
            PaymentMismatch: cash_payment differs from the server figure by more
                than the tolerance
        """
        replay = RedemptionService._find_replay(user, idempotency_key, product_id, credits_requested)
        if replay is not None:
            return replay

        RedemptionService._check_credits(user, credits_requested)
        product = ProductService.get_product(product_id)

        engine = PricingEngine.from_settings()
        quote = engine.quote(product.price, credits_requested, user.credits)

        if not engine.payment_matches(cash_payment, quote):
            logger.warning(
                f"Payment mismatch for user {user.pk}, product {product.pk}: "
                f"submitted {cash_payment}, expected {quote.cash_payment}"
            )
            raise PaymentMismatch()

        User = get_user_model()
        try:
            with transaction.atomic():
                # Serialize settlements per user for the rest of the transaction
                locked_user = User.objects.select_for_update().get(pk=user.pk)
                if idempotency_key:
                    # A duplicate that waited on the lock sees the order committed by the first request
                    existing = Order.objects.filter(user=locked_user, idempotency_key=idempotency_key).first()
                    if existing is not None:
                        return RedemptionService._replay(user, existing, product_id, credits_requested)
                RedemptionService._check_credits(locked_user, credits_requested)

                order = Order.objects.create(
                    user=locked_user,
                    product=product,
                    credits_applied=quote.credits_applied,
                    credit_value=quote.credit_value,
                    cash_payment=quote.cash_payment,
                    subtotal=quote.subtotal,
                    shipping=quote.shipping,
                    tax=quote.tax,
                    total=quote.total,
                    status=Order.STATUS_COMPLETED,
                    idempotency_key=idempotency_key or None,
                )

                CreditService.debit(
                    locked_user,
                    credits_requested,
                    description=f"Redeemed for {product.name}",
                    reference_id=f"order_{order.pk}",
                )

                MetricsService.record_redemption()
        except IntegrityError:
            # A concurrent request with the same key won the unique constraint
            replay = RedemptionService._find_replay(user, idempotency_key, product_id, credits_requested)
            if replay is not None:
                return replay
            raise

        user.credits = locked_user.credits
        audit_logger.info(
            f"Order {order.pk} settled: user={user.pk} product={product.pk} "
            f"credits={credits_requested} cash={quote.cash_payment} remaining={locked_user.credits}"
        )
        return SettlementResult(order=order, remaining_credits=locked_user.credits)
