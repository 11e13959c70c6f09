"""Infrastructure failures surfaced through the domain layer."""

from .base import DomainException


class InfrastructureException(DomainException):
    """
    Raised when storage fails underneath a use case.

    Wraps connection, lock-acquisition and commit failures so callers can
    tell them apart from business rule violations.
    """

    def __init__(self, operation: str, detail: str = ""):
        message = f"Infrastructure failure during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(
            message=message,
            code="INFRASTRUCTURE_ERROR",
        )
        self.operation = operation

    @property
    def public_message(self) -> str:
        return "Unable to process request. Please try again later."


class TransactionTimeoutException(InfrastructureException):
    """Raised when a unit of work does not finish before its deadline."""

    def __init__(self, operation: str, timeout: float):
        super().__init__(operation=operation, detail=f"timed out after {timeout}s")
        self.code = "TRANSACTION_TIMEOUT"
        self.timeout = timeout

    @property
    def public_message(self) -> str:
        return "Service temporarily unavailable. Please try again."
