"""
Transaction pricing rules.

Interest is flat: a fixed fraction of the OTR price for every month of
the tenor. The admin fee counts toward the principal but bears no interest.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from .settings import FinancingSettings, financing_settings

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Coerce a number to a two-decimal Decimal."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_principal(otr_amount: Decimal, admin_fee: Decimal) -> Decimal:
    """Amount counted against the customer's limit."""
    return to_money(otr_amount + admin_fee)


def calculate_interest(
    otr_amount: Decimal,
    tenor_months: int,
    settings: Optional[FinancingSettings] = None,
) -> Decimal:
    """
    Calculate the total flat interest for a transaction.

    Example:
        OTR 40000 over 6 months at 2% -> 40000 * 0.02 * 6 = 4800
    """
    rate = (settings or financing_settings).monthly_interest_rate
    return to_money(otr_amount * rate * tenor_months)


def calculate_total_installment(
    otr_amount: Decimal,
    admin_fee: Decimal,
    tenor_months: int,
    settings: Optional[FinancingSettings] = None,
) -> Decimal:
    """Principal plus interest."""
    return calculate_principal(otr_amount, admin_fee) + calculate_interest(
        otr_amount, tenor_months, settings
    )


def calculate_remaining_limit(limit_amount: Decimal, used_amount: Decimal) -> Decimal:
    return to_money(limit_amount - used_amount)


def has_sufficient_limit(remaining: Decimal, requested: Decimal) -> bool:
    """A request that exactly consumes the remaining limit is allowed."""
    return not remaining < requested
