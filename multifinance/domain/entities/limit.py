"""Credit limit entities."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class CustomerLimit:
    """Limit amount granted to a customer for one tenor."""

    customer_id: int
    tenor_id: int
    limit_amount: Decimal


@dataclass(frozen=True)
class LimitUsage:
    """
    Snapshot of how much of a limit is in use.

    Attributes:
        tenor_months: Duration of the tenor the limit applies to
        limit_amount: Configured limit
        used_amount: Principal of the customer's ACTIVE transactions
    """

    tenor_months: int
    limit_amount: Decimal
    used_amount: Decimal

    @property
    def remaining_amount(self) -> Decimal:
        return self.limit_amount - self.used_amount
