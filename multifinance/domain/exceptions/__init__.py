"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .customer import (
    CustomerAlreadyRegisteredException,
    CustomerNotFoundException,
    CustomerNotVerifiedException,
    InvalidVerificationStateException,
)
from .limit import (
    InsufficientLimitException,
    InvalidLimitAmountException,
    LimitNotSetException,
    TenorNotFoundException,
)
from .infrastructure import InfrastructureException, TransactionTimeoutException
from .request import InvalidRequestException

__all__ = [
    "DomainException",
    "CustomerAlreadyRegisteredException",
    "CustomerNotFoundException",
    "CustomerNotVerifiedException",
    "InvalidVerificationStateException",
    "InsufficientLimitException",
    "InvalidLimitAmountException",
    "LimitNotSetException",
    "TenorNotFoundException",
    "InfrastructureException",
    "TransactionTimeoutException",
    "InvalidRequestException",
]
