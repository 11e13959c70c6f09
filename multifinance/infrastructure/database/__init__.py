"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager
from .models import (
    Base,
    CustomerModel,
    TenorModel,
    CustomerLimitModel,
    TransactionModel,
)
from .seed import seed_tenors

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "CustomerModel",
    "TenorModel",
    "CustomerLimitModel",
    "TransactionModel",
    "seed_tenors",
]
