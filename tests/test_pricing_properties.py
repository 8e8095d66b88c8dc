"""
Property-based tests for the redemption pricing engine.
"""
import pytest
from decimal import Decimal
from hypothesis import given, strategies as st, settings as hypothesis_settings

from apps.credits.services import PricingEngine

prices = st.decimals(min_value=Decimal('0'), max_value=Decimal('10000.00'), places=2)
credit_counts = st.integers(min_value=0, max_value=1_000_000)


class TestQuoteExamples:
    """Worked examples against the default rates"""

    def setup_method(self):
        self.engine = PricingEngine()

    def test_partial_credit_coverage(self):
        quote = self.engine.quote(Decimal('24.99'), 100, 1250)

        assert quote.subtotal == Decimal('24.99')
        assert quote.shipping == Decimal('4.99')
        assert quote.tax == Decimal('1.9992')
        assert quote.total == Decimal('31.9792')
        assert quote.credits_applied == 100
        assert quote.credit_value == Decimal('3.00')
        assert quote.cash_payment == Decimal('28.9792')
        assert quote.max_credits_usable == 499

    def test_credit_value_capped_at_coverage_limit(self):
        quote = self.engine.quote(Decimal('49.99'), 2000, 5000)

        # 2000 credits are worth 60.00 but only 60% of 49.99 may be covered
        assert quote.credit_value == Decimal('29.994')
        assert quote.credits_applied == 2000
        assert quote.cash_payment == Decimal('28.9852')
        assert quote.max_credits_usable == 999

    def test_no_credits(self):
        quote = self.engine.quote(Decimal('19.99'), 0, 0)

        assert quote.credit_value == 0
        assert quote.cash_payment == quote.total == Decimal('26.5792')
        assert quote.max_credits_usable == 0

    def test_max_credits_usable_limited_by_balance(self):
        quote = self.engine.quote(Decimal('49.99'), 0, 120)
        assert quote.max_credits_usable == 120

    def test_zero_price(self):
        quote = self.engine.quote(Decimal('0'), 50, 50)

        assert quote.credit_value == 0
        assert quote.tax == 0
        assert quote.cash_payment == Decimal('4.99')
        assert quote.max_credits_usable == 0

    def test_as_dict_carries_every_figure(self):
        data = self.engine.quote(Decimal('24.99'), 100, 1250).as_dict()
        assert set(data) == {
            'subtotal', 'shipping', 'tax', 'total', 'credits_applied',
            'credit_value', 'cash_payment', 'max_credits_usable',
        }

    def test_payment_within_tolerance(self):
        quote = self.engine.quote(Decimal('24.99'), 100, 1250)

        assert self.engine.payment_matches(Decimal('28.9792'), quote)
        assert self.engine.payment_matches(Decimal('28.98'), quote)
        assert self.engine.payment_matches(28.979200000000002, quote)
        assert not self.engine.payment_matches(Decimal('28.9992'), quote)
        assert not self.engine.payment_matches(Decimal('28.95'), quote)

    def test_zero_credit_value_allows_no_credits(self):
        engine = PricingEngine(credit_value='0')
        assert engine.max_credits_usable(Decimal('49.99'), 5000) == 0


class TestQuoteProperties:
    """Invariants that hold for every price, request and balance"""

    engine = PricingEngine()

    @given(price=prices, credits=credit_counts, balance=credit_counts)
    @hypothesis_settings(max_examples=200, deadline=None)
    def test_cash_payment_is_total_minus_credit_value(self, price, credits, balance):
        quote = self.engine.quote(price, credits, balance)
        assert quote.cash_payment == quote.total - quote.credit_value

    @given(price=prices, credits=credit_counts, balance=credit_counts)
    @hypothesis_settings(max_examples=200, deadline=None)
    def test_credit_value_never_exceeds_cap_or_credit_worth(self, price, credits, balance):
        quote = self.engine.quote(price, credits, balance)

        assert quote.credit_value <= price * Decimal('0.6')
        assert quote.credit_value <= credits * Decimal('0.03')
        assert quote.credit_value >= 0

    @given(price=prices, credits=credit_counts, balance=credit_counts)
    @hypothesis_settings(max_examples=200, deadline=None)
    def test_total_unaffected_by_credits(self, price, credits, balance):
        with_credits = self.engine.quote(price, credits, balance)
        without_credits = self.engine.quote(price, 0, balance)

        assert with_credits.total == without_credits.total
        assert with_credits.total == price + Decimal('4.99') + price * Decimal('0.08')
        assert with_credits.cash_payment >= Decimal('4.99')

    @given(price=prices, credits=credit_counts, balance=credit_counts)
    @hypothesis_settings(max_examples=100, deadline=None)
    def test_quote_is_deterministic(self, price, credits, balance):
        assert self.engine.quote(price, credits, balance) == self.engine.quote(price, credits, balance)

    @given(price=prices, balance=credit_counts)
    @hypothesis_settings(max_examples=200, deadline=None)
    def test_max_credits_usable_is_largest_within_cap(self, price, balance):
        usable = self.engine.max_credits_usable(price, balance)
        cap = price * Decimal('0.6')

        assert 0 <= usable <= balance
        assert usable * Decimal('0.03') <= cap
        if usable < balance:
            assert (usable + 1) * Decimal('0.03') > cap

    @given(price=prices, credits=credit_counts)
    @hypothesis_settings(max_examples=100, deadline=None)
    def test_server_figure_always_matches_itself(self, price, credits):
        quote = self.engine.quote(price, credits, credits)
        assert self.engine.payment_matches(quote.cash_payment, quote)
        assert not self.engine.payment_matches(quote.cash_payment + Decimal('0.02'), quote)


def test_engine_reads_rates_from_settings(settings):
    settings.MERCH_PRICING = {'SHIPPING_FEE': '0', 'TAX_RATE': '0.1'}

    engine = PricingEngine.from_settings()
    quote = engine.quote(Decimal('10.00'), 0, 0)

    assert quote.shipping == 0
    assert quote.tax == Decimal('1.000')
    assert engine.credit_value == Decimal('0.03')
