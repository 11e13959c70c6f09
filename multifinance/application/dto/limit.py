"""Data transfer objects for limit administration and reporting."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List


@dataclass(frozen=True)
class LimitItem:
    """One tenor limit inside a bulk set request."""

    tenor_months: int
    limit_amount: Decimal


@dataclass(frozen=True)
class SetLimitsRequest:
    """Input data for setting a customer's limits."""

    limits: List[LimitItem]

    def validate(self) -> List[str]:
        errors = []

        if not self.limits:
            errors.append("at least one limit is required")

        months = [item.tenor_months for item in self.limits]
        if len(set(months)) != len(months):
            errors.append("tenor_months must not repeat")

        return errors


@dataclass(frozen=True)
class LimitDetailResponse:
    """Limit, usage and remaining amount for one tenor."""

    tenor_months: int
    limit_amount: Decimal
    used_amount: Decimal
    remaining_limit: Decimal

    @classmethod
    def from_usage(cls, usage) -> "LimitDetailResponse":
        return cls(
            tenor_months=usage.tenor_months,
            limit_amount=usage.limit_amount,
            used_amount=usage.used_amount,
            remaining_limit=usage.remaining_amount,
        )
