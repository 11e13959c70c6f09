"""Data Transfer Objects for application layer."""

from .customer import (
    RegisterCustomerRequest,
    UpdateProfileRequest,
    VerificationRequest,
    CustomerResponse,
)
from .limit import LimitItem, SetLimitsRequest, LimitDetailResponse
from .transaction import (
    CreateTransactionRequest,
    CheckLimitRequest,
    CheckLimitResponse,
    TransactionResponse,
)
from .pagination import PageResponse

__all__ = [
    "RegisterCustomerRequest",
    "UpdateProfileRequest",
    "VerificationRequest",
    "CustomerResponse",
    "LimitItem",
    "SetLimitsRequest",
    "LimitDetailResponse",
    "CreateTransactionRequest",
    "CheckLimitRequest",
    "CheckLimitResponse",
    "TransactionResponse",
    "PageResponse",
]
