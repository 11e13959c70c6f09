"""Request validation exceptions."""

from .base import DomainException


class InvalidRequestException(DomainException):
    """Raised when a use case receives input that fails validation."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_REQUEST",
        )
