"""
Domain Interfaces (Ports)
"""

from .repositories import (
    CustomerRepository,
    TenorRepository,
    LimitRepository,
    TransactionRepository,
)
from .unit_of_work import UnitOfWork

__all__ = [
    "CustomerRepository",
    "TenorRepository",
    "LimitRepository",
    "TransactionRepository",
    "UnitOfWork",
]
