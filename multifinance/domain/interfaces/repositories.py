"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from multifinance.domain.entities import (
    Customer,
    CustomerLimit,
    Page,
    PageParams,
    Tenor,
    Transaction,
)


class CustomerRepository(ABC):
    """
    Abstract repository for Customer persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """
        Persist a new customer.

        Args:
            customer: The customer to save

        Returns:
            The saved customer with its generated id populated
        """
        ...

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        """Write the mutable fields of an existing customer."""
        ...

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        ...

    @abstractmethod
    async def get_by_nik(self, nik: str) -> Optional[Customer]:
        """
        Retrieve a customer by national ID without locking.

        Args:
            nik: The customer's national ID

        Returns:
            The customer if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_nik_for_update(self, nik: str) -> Optional[Customer]:
        """
        Retrieve a customer by national ID and lock it exclusively.

        The lock is held until the enclosing unit of work commits or
        rolls back. Only call this from inside a unit of work.

        Args:
            nik: The customer's national ID

        Returns:
            The locked customer if found, None otherwise
        """
        ...

    @abstractmethod
    async def list(self, params: PageParams) -> Page[Customer]:
        """
        Retrieve a page of customers, optionally filtered by status.

        Args:
            params: Page number, page size and verification status filter

        Returns:
            Page of customers ordered by id ascending
        """
        ...


class TenorRepository(ABC):
    """Read-only access to tenor reference data."""

    @abstractmethod
    async def get_by_duration(self, duration_months: int) -> Optional[Tenor]:
        ...

    @abstractmethod
    async def get_all(self) -> List[Tenor]:
        ...


class LimitRepository(ABC):
    """Abstract repository for per-tenor customer limits."""

    @abstractmethod
    async def get(self, customer_id: int, tenor_id: int) -> Optional[CustomerLimit]:
        """
        Retrieve the limit for one customer and tenor.

        Returns:
            The limit if configured, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_customer_id(self, customer_id: int) -> List[CustomerLimit]:
        ...

    @abstractmethod
    async def upsert_many(self, limits: List[CustomerLimit]) -> None:
        """
        Insert or replace limits keyed by (customer_id, tenor_id).

        Args:
            limits: Limits to write
        """
        ...


class TransactionRepository(ABC):
    """Abstract repository for financing transactions."""

    @abstractmethod
    async def save(self, transaction: Transaction) -> Transaction:
        """
        Persist a new transaction.

        Args:
            transaction: The transaction to save

        Returns:
            The saved transaction with its generated id populated
        """
        ...

    @abstractmethod
    async def sum_active_principal(self, customer_id: int, tenor_id: int) -> Decimal:
        """
        Sum OTR amount plus admin fee over ACTIVE transactions.

        Args:
            customer_id: The customer's id
            tenor_id: The tenor's id

        Returns:
            The used amount, zero when there are no active transactions
        """
        ...

    @abstractmethod
    async def list_by_customer_id(
        self,
        customer_id: int,
        params: PageParams,
    ) -> Page[Transaction]:
        """
        Retrieve a page of a customer's transactions.

        Returns:
            Page of transactions, newest first
        """
        ...
