"""Domain Entities - Core business objects."""

from .customer import Customer, VerificationStatus
from .tenor import Tenor
from .limit import CustomerLimit, LimitUsage
from .transaction import Transaction, TransactionStatus
from .pagination import PageParams, Page

__all__ = [
    "Customer",
    "VerificationStatus",
    "Tenor",
    "CustomerLimit",
    "LimitUsage",
    "Transaction",
    "TransactionStatus",
    "PageParams",
    "Page",
]
