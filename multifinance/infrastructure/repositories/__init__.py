"""Repository implementations."""

from .customer_repository import PostgresCustomerRepository
from .tenor_repository import PostgresTenorRepository
from .limit_repository import PostgresLimitRepository
from .transaction_repository import PostgresTransactionRepository
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "PostgresCustomerRepository",
    "PostgresTenorRepository",
    "PostgresLimitRepository",
    "PostgresTransactionRepository",
    "SqlAlchemyUnitOfWork",
]
