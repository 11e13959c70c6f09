"""Customer-related domain exceptions."""

from .base import DomainException


class CustomerNotFoundException(DomainException):
    """Raised when a customer cannot be found."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Customer not found: {identifier}",
            code="CUSTOMER_NOT_FOUND",
        )
        self.identifier = identifier


class CustomerNotVerifiedException(DomainException):
    """Raised when an unverified customer tries to use their limit."""

    def __init__(self, nik: str):
        super().__init__(
            message=f"Customer with NIK {nik} is not verified",
            code="CUSTOMER_NOT_VERIFIED",
        )
        self.nik = nik


class CustomerAlreadyRegisteredException(DomainException):
    """Raised when registering a NIK that already exists."""

    def __init__(self, nik: str):
        super().__init__(
            message=f"Customer already registered: {nik}",
            code="CUSTOMER_ALREADY_REGISTERED",
        )
        self.nik = nik


class InvalidVerificationStateException(DomainException):
    """Raised when verifying a customer that is no longer PENDING."""

    def __init__(self, current_status: str):
        super().__init__(
            message=f"Customer is not in PENDING state, current state: {current_status}",
            code="INVALID_VERIFICATION_STATE",
        )
        self.current_status = current_status
