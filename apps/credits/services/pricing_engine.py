"""
Credit redemption pricing.

Turns a product price and a requested credit count into an itemized quote.
The engine is pure: no database access, no side effects, and the same
inputs always give the same quote. Balance sufficiency and product
existence are checked by the caller.
"""
from dataclasses import dataclass, asdict
from decimal import Decimal, ROUND_FLOOR

from django.conf import settings

from apps.common.utils import to_decimal

# 1 credit = $0.03
CREDIT_VALUE = Decimal('0.03')
SHIPPING_FEE = Decimal('4.99')
TAX_RATE = Decimal('0.08')
# At most 60% of the subtotal may be covered by credits
MAX_CREDIT_COVERAGE = Decimal('0.6')
# Absolute currency tolerance when comparing a client cash figure to the quote
PAYMENT_TOLERANCE = Decimal('0.01')


@dataclass(frozen=True)
class CreditQuote:
    """Itemized, non-binding price breakdown for a prospective redemption"""
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal
    credits_applied: int
    credit_value: Decimal
    cash_payment: Decimal
    max_credits_usable: int

    def as_dict(self):
        return asdict(self)


class PricingEngine:
    """Quote calculator for credit redemptions"""

    def __init__(self, credit_value=CREDIT_VALUE, shipping_fee=SHIPPING_FEE,
                 tax_rate=TAX_RATE, max_credit_coverage=MAX_CREDIT_COVERAGE,
                 payment_tolerance=PAYMENT_TOLERANCE):
        self.credit_value = to_decimal(credit_value)
        self.shipping_fee = to_decimal(shipping_fee)
        self.tax_rate = to_decimal(tax_rate)
        self.max_credit_coverage = to_decimal(max_credit_coverage)
        self.payment_tolerance = to_decimal(payment_tolerance)

    @classmethod
    def from_settings(cls):
        """Build an engine from the MERCH_PRICING setting, falling back to the defaults"""
        overrides = getattr(settings, 'MERCH_PRICING', {}) or {}
        return cls(
            credit_value=overrides.get('CREDIT_VALUE', CREDIT_VALUE),
            shipping_fee=overrides.get('SHIPPING_FEE', SHIPPING_FEE),
            tax_rate=overrides.get('TAX_RATE', TAX_RATE),
            max_credit_coverage=overrides.get('MAX_CREDIT_COVERAGE', MAX_CREDIT_COVERAGE),
            payment_tolerance=overrides.get('PAYMENT_TOLERANCE', PAYMENT_TOLERANCE),
        )

    def max_credit_value(self, subtotal):
        """Largest dollar amount credits may cover for this subtotal"""
        return to_decimal(subtotal) * self.max_credit_coverage

    def max_credits_usable(self, subtotal, user_credit_balance):
        """
        Most credits worth applying: enough to reach the coverage cap without
        exceeding it, and never more than the balance.
        """
        if self.credit_value <= 0:
            return 0
        by_coverage = (self.max_credit_value(subtotal) / self.credit_value).to_integral_value(rounding=ROUND_FLOOR)
        return max(0, min(int(by_coverage), int(user_credit_balance)))

    def quote(self, product_price, credits_requested, user_credit_balance):
        """
        Price a redemption.

        Args:
            product_price: Product price (>= 0), used as the subtotal
            credits_requested: Credits the user wants to apply (>= 0)
            user_credit_balance: The user's current balance (>= 0)

        Returns:
            CreditQuote: Requested credits beyond the coverage cap are capped
            silently; the displayed total is never reduced by credits.
        """
        subtotal = to_decimal(product_price)
        shipping = self.shipping_fee
        tax = subtotal * self.tax_rate

        credit_dollar_value = int(credits_requested) * self.credit_value
        applied_credit_value = min(credit_dollar_value, self.max_credit_value(subtotal))

        return CreditQuote(
            subtotal=subtotal,
            shipping=shipping,
            tax=tax,
            total=subtotal + shipping + tax,
            credits_applied=int(credits_requested),
            credit_value=applied_credit_value,
            cash_payment=subtotal - applied_credit_value + shipping + tax,
            max_credits_usable=self.max_credits_usable(subtotal, user_credit_balance),
        )

    def payment_matches(self, submitted_cash_payment, quote):
        """Check a client cash figure against a server quote within the tolerance"""
        difference = abs(to_decimal(submitted_cash_payment) - quote.cash_payment)
        return difference <= self.payment_tolerance
