"""Pydantic schemas for API request/response validation."""

from .customer import (
    RegisterCustomerRequestSchema,
    UpdateProfileRequestSchema,
    VerificationRequestSchema,
    CustomerResponseSchema,
    CustomerPageSchema,
)
from .limit import (
    LimitItemSchema,
    SetLimitsRequestSchema,
    SetLimitsResponseSchema,
    LimitDetailSchema,
)
from .transaction import (
    CreateTransactionRequestSchema,
    TransactionResponseSchema,
    TransactionPageSchema,
    CheckLimitRequestSchema,
    CheckLimitResponseSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "RegisterCustomerRequestSchema",
    "UpdateProfileRequestSchema",
    "VerificationRequestSchema",
    "CustomerResponseSchema",
    "CustomerPageSchema",
    "LimitItemSchema",
    "SetLimitsRequestSchema",
    "SetLimitsResponseSchema",
    "LimitDetailSchema",
    "CreateTransactionRequestSchema",
    "TransactionResponseSchema",
    "TransactionPageSchema",
    "CheckLimitRequestSchema",
    "CheckLimitResponseSchema",
    "ErrorResponseSchema",
]
