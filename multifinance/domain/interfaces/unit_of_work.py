"""Unit of work interface."""

from abc import ABC, abstractmethod

from .repositories import (
    CustomerRepository,
    LimitRepository,
    TenorRepository,
    TransactionRepository,
)


class UnitOfWork(ABC):
    """
    A single atomic database transaction.

    Used as an async context manager. Repositories exposed on the unit of
    work share its transaction. Leaving the block without calling
    ``commit()`` rolls every write back, and any locks taken through
    ``customers.get_by_nik_for_update`` are released on exit.
    """

    customers: CustomerRepository
    tenors: TenorRepository
    limits: LimitRepository
    transactions: TransactionRepository

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.rollback()

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...
