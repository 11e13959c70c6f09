"""SQLAlchemy implementation of UnitOfWork."""

from contextlib import AsyncExitStack

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from multifinance.domain.exceptions import InfrastructureException
from multifinance.domain.interfaces import UnitOfWork
from multifinance.infrastructure.locking import KeyedLock, customer_locks
from .customer_repository import PostgresCustomerRepository
from .limit_repository import PostgresLimitRepository
from .tenor_repository import PostgresTenorRepository
from .transaction_repository import PostgresTransactionRepository

logger = structlog.get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of work over one AsyncSession.

    Storage errors raised inside the block, or by commit and rollback, are
    re-raised as InfrastructureException tagged with ``operation``.
    Customer locks taken during the unit of work are released after the
    session has been rolled back (a no-op after commit) and closed, and are
    released even when rollback or close fails or is cancelled.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        locks: KeyedLock | None = None,
        operation: str = "unit_of_work",
    ):
        self._session_factory = session_factory
        self._locks = locks if locks is not None else customer_locks
        self._operation = operation
        self._session: AsyncSession | None = None
        self._held: AsyncExitStack | None = None

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        self._held = AsyncExitStack()
        self._session = self._session_factory()

        self.customers = PostgresCustomerRepository(self._session, row_lock=self._lock_customer)
        self.tenors = PostgresTenorRepository(self._session)
        self.limits = PostgresLimitRepository(self._session)
        self.transactions = PostgresTransactionRepository(self._session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        held, self._held = self._held, None
        try:
            try:
                await self.rollback()
            finally:
                await self._close()
        finally:
            await held.aclose()
            self._session = None

        if isinstance(exc, SQLAlchemyError):
            logger.error(
                "unit_of_work_failed",
                operation=self._operation,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise InfrastructureException(self._operation, str(exc)) from exc

    async def _lock_customer(self, nik: str) -> None:
        await self._held.enter_async_context(self._locks.hold(nik))
        logger.debug("customer_lock_acquired", operation=self._operation, nik=nik)

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise InfrastructureException(f"{self._operation}.commit", str(exc)) from exc

    async def rollback(self) -> None:
        try:
            await self._session.rollback()
        except SQLAlchemyError as exc:
            raise InfrastructureException(f"{self._operation}.rollback", str(exc)) from exc

    async def _close(self) -> None:
        try:
            await self._session.close()
        except SQLAlchemyError as exc:
            raise InfrastructureException(f"{self._operation}.close", str(exc)) from exc
