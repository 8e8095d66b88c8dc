"""
Tests for redemption quotes and settlement.
"""
from decimal import Decimal
from unittest.mock import patch

from django.test import TestCase

from apps.common.exceptions import (
    IdempotencyConflict, InvalidInput, InsufficientCredits, NotFound, PaymentMismatch
)
from apps.credits.models import CreditTransaction
from apps.metrics.models import DailyMetrics
from apps.metrics.services import MetricsService
from apps.orders.models import Order
from apps.orders.services import RedemptionService
from apps.users.models import User
from tests.factories import ProductFactory, UserFactory


class RedemptionQuoteTest(TestCase):
    """Quotes price against stored state and write nothing"""

    def setUp(self):
        self.user = UserFactory(credits=1250)
        self.product = ProductFactory(price=Decimal('24.99'))

    def test_quote_uses_stored_price(self):
        product, quote = RedemptionService.quote(self.user, str(self.product.pk), 100)

        self.assertEqual(product, self.product)
        self.assertEqual(quote.cash_payment, Decimal('28.9792'))
        self.assertEqual(quote.max_credits_usable, 499)

    def test_quote_has_no_side_effects(self):
        RedemptionService.quote(self.user, self.product.pk, 100)

        self.user.refresh_from_db()
        self.assertEqual(self.user.credits, 1250)
        self.assertFalse(Order.objects.exists())
        self.assertFalse(DailyMetrics.objects.exists())

    def test_quote_rejects_credits_above_balance(self):
        with self.assertRaises(InsufficientCredits):
            RedemptionService.quote(self.user, self.product.pk, 1251)

    def test_quote_unknown_product(self):
        with self.assertRaises(NotFound):
            RedemptionService.quote(self.user, 999999, 0)

    def test_balance_checked_before_product(self):
        with self.assertRaises(InsufficientCredits):
            RedemptionService.quote(self.user, 'not-a-product', 5000)


class RedemptionSettlementTest(TestCase):
    """Settlement writes order, debit and metrics together"""

    def setUp(self):
        self.user = UserFactory(credits=1250)
        self.product = ProductFactory(price=Decimal('24.99'))

    def _settle(self, credits=100, cash=Decimal('28.9792'), **kwargs):
        return RedemptionService.settle(self.user, self.product.pk, credits, cash, **kwargs)

    def test_successful_settlement(self):
        result = self._settle()

        self.assertFalse(result.replayed)
        self.assertEqual(result.remaining_credits, 1150)

        self.user.refresh_from_db()
        self.assertEqual(self.user.credits, 1150)

        order = Order.objects.get()
        self.assertEqual(order, result.order)
        self.assertEqual(order.status, Order.STATUS_COMPLETED)
        self.assertEqual(order.user, self.user)
        self.assertEqual(order.product, self.product)
        self.assertEqual(order.credits_applied, 100)
        self.assertEqual(order.credit_value, Decimal('3.00'))
        self.assertEqual(order.cash_payment, Decimal('28.9792'))
        self.assertEqual(order.total, Decimal('31.9792'))

    def test_settlement_records_metrics(self):
        self._settle()

        metrics = DailyMetrics.objects.get(date=MetricsService.today())
        self.assertEqual(metrics.purchases, 1)
        self.assertEqual(metrics.redemptions, 1)
        self.assertEqual(metrics.bursts, 0)

    def test_settlement_writes_ledger_entry(self):
        result = self._settle()

        entry = CreditTransaction.objects.get(user=self.user)
        self.assertEqual(entry.amount, -100)
        self.assertEqual(entry.balance_after, 1150)
        self.assertEqual(entry.transaction_type, 'redemption')
        self.assertEqual(entry.reference_id, f"order_{result.order.pk}")

    def test_client_cash_with_float_noise_accepted(self):
        result = self._settle(cash=28.979200000000002)
        # The server figure is stored, never the client one
        self.assertEqual(result.order.cash_payment, Decimal('28.9792'))

    def test_payment_mismatch_changes_nothing(self):
        with self.assertRaises(PaymentMismatch):
            self._settle(cash=Decimal('28.9992'))

        self.user.refresh_from_db()
        self.assertEqual(self.user.credits, 1250)
        self.assertFalse(Order.objects.exists())
        self.assertFalse(DailyMetrics.objects.exists())

    def test_insufficient_credits_changes_nothing(self):
        user = UserFactory(credits=50)

        with self.assertRaises(InsufficientCredits):
            RedemptionService.settle(user, self.product.pk, 100, Decimal('28.9792'))

        user.refresh_from_db()
        self.assertEqual(user.credits, 50)
        self.assertFalse(Order.objects.exists())
        self.assertFalse(CreditTransaction.objects.exists())

    def test_negative_credits_rejected(self):
        with self.assertRaises(InvalidInput):
            self._settle(credits=-1)

    def test_unknown_product(self):
        with self.assertRaises(NotFound):
            RedemptionService.settle(self.user, 424242, 0, Decimal('0'))

    def test_zero_credit_settlement(self):
        result = self._settle(credits=0, cash=Decimal('31.9792'))

        self.assertEqual(result.remaining_credits, 1250)
        self.assertEqual(result.order.credit_value, 0)

    def test_failure_in_metrics_rolls_back_order_and_debit(self):
        with patch.object(MetricsService, 'record_redemption', side_effect=RuntimeError('metrics down')):
            with self.assertRaises(RuntimeError):
                self._settle()

        self.user.refresh_from_db()
        self.assertEqual(self.user.credits, 1250)
        self.assertFalse(Order.objects.exists())
        self.assertFalse(CreditTransaction.objects.exists())

    def test_second_settlement_cannot_overdraw(self):
        user = UserFactory(credits=150)

        RedemptionService.settle(user, self.product.pk, 100, Decimal('28.9792'))
        with self.assertRaises(InsufficientCredits):
            RedemptionService.settle(user, self.product.pk, 100, Decimal('28.9792'))

        user.refresh_from_db()
        self.assertEqual(user.credits, 50)
        self.assertEqual(Order.objects.count(), 1)

    def test_stale_balance_rechecked_under_lock(self):
        # Another settlement spent the credits after this user object was loaded
        User.objects.filter(pk=self.user.pk).update(credits=50)

        with self.assertRaises(InsufficientCredits):
            self._settle()

        self.assertEqual(User.objects.get(pk=self.user.pk).credits, 50)
        self.assertFalse(Order.objects.exists())

    def test_repeated_idempotency_key_replays_first_result(self):
        first = self._settle(idempotency_key='checkout-1')
        second = self._settle(idempotency_key='checkout-1')

        self.assertTrue(second.replayed)
        self.assertEqual(second.order.pk, first.order.pk)
        self.assertEqual(second.remaining_credits, 1150)
        self.assertEqual(Order.objects.count(), 1)
        self.assertEqual(DailyMetrics.objects.get().redemptions, 1)

    def test_distinct_idempotency_keys_settle_separately(self):
        self._settle(idempotency_key='checkout-1')
        result = self._settle(idempotency_key='checkout-2')

        self.assertFalse(result.replayed)
        self.assertEqual(result.remaining_credits, 1050)
        self.assertEqual(Order.objects.count(), 2)

    def test_duplicate_waiting_on_lock_replays_committed_order(self):
        user = UserFactory(credits=150)
        first = RedemptionService.settle(user, self.product.pk, 100, Decimal('28.9792'), idempotency_key='k')

        # The duplicate passed the early lookup before the first request committed
        with patch.object(RedemptionService, '_find_replay', return_value=None):
            second = RedemptionService.settle(user, self.product.pk, 100, Decimal('28.9792'), idempotency_key='k')

        self.assertTrue(second.replayed)
        self.assertEqual(second.order.pk, first.order.pk)
        self.assertEqual(second.remaining_credits, 50)
        self.assertEqual(Order.objects.count(), 1)
        self.assertEqual(CreditTransaction.objects.count(), 1)

    def test_key_reused_for_other_product_rejected(self):
        other = ProductFactory(price=Decimal('24.99'))
        self._settle(idempotency_key='checkout-1')

        with self.assertRaises(IdempotencyConflict):
            RedemptionService.settle(self.user, other.pk, 100, Decimal('28.9792'), idempotency_key='checkout-1')

        self.user.refresh_from_db()
        self.assertEqual(self.user.credits, 1150)
        self.assertEqual(Order.objects.count(), 1)

    def test_key_reused_for_other_credit_count_rejected(self):
        self._settle(idempotency_key='checkout-1')

        with self.assertRaises(IdempotencyConflict):
            self._settle(credits=50, cash=Decimal('30.4792'), idempotency_key='checkout-1')

        self.assertEqual(Order.objects.count(), 1)

    def test_key_reused_under_lock_for_other_product_rejected(self):
        other = ProductFactory(price=Decimal('24.99'))
        self._settle(idempotency_key='checkout-1')

        with patch.object(RedemptionService, '_find_replay', return_value=None):
            with self.assertRaises(IdempotencyConflict):
                RedemptionService.settle(self.user, other.pk, 100, Decimal('28.9792'), idempotency_key='checkout-1')

        self.assertEqual(Order.objects.count(), 1)
