"""Tenor and limit domain exceptions."""

from decimal import Decimal

from .base import DomainException


class TenorNotFoundException(DomainException):
    """Raised when no tenor matches the requested duration."""

    def __init__(self, tenor_months: int):
        super().__init__(
            message=f"Tenor not found: {tenor_months} months",
            code="TENOR_NOT_FOUND",
        )
        self.tenor_months = tenor_months


class LimitNotSetException(DomainException):
    """Raised when the customer has no limit configured for a tenor."""

    def __init__(self, tenor_months: int):
        super().__init__(
            message=f"Limit for {tenor_months}-month tenor is not set for the customer",
            code="LIMIT_NOT_SET",
        )
        self.tenor_months = tenor_months


class InsufficientLimitException(DomainException):
    """Raised when the requested principal exceeds the remaining limit."""

    def __init__(self, remaining: Decimal, requested: Decimal):
        super().__init__(
            message="Insufficient limit for this transaction",
            code="INSUFFICIENT_LIMIT",
        )
        self.remaining = remaining
        self.requested = requested


class InvalidLimitAmountException(DomainException):
    """Raised when an administrator submits a negative limit."""

    def __init__(self, tenor_months: int):
        super().__init__(
            message=f"Limit amount cannot be negative (tenor {tenor_months} months)",
            code="INVALID_LIMIT_AMOUNT",
        )
        self.tenor_months = tenor_months
