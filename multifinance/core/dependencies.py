"""Dependency injection for FastAPI."""

from functools import partial
from typing import Annotated, Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.core.config import settings
from multifinance.core.metrics import TransactionMetrics, VerificationMetrics
from multifinance.domain.interfaces import UnitOfWork
from multifinance.infrastructure.database import db_manager, get_db_session
from multifinance.infrastructure.locking import customer_locks
from multifinance.infrastructure.repositories import (
    PostgresCustomerRepository,
    PostgresLimitRepository,
    PostgresTenorRepository,
    PostgresTransactionRepository,
    SqlAlchemyUnitOfWork,
)
from multifinance.application.services import AdminService, PartnerService, ProfileService

UnitOfWorkFactory = Callable[..., UnitOfWork]


# Repository dependencies
async def get_customer_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresCustomerRepository:
    """Get a CustomerRepository instance."""
    return PostgresCustomerRepository(session)


async def get_tenor_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresTenorRepository:
    """Get a TenorRepository instance."""
    return PostgresTenorRepository(session)


async def get_limit_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresLimitRepository:
    """Get a LimitRepository instance."""
    return PostgresLimitRepository(session)


async def get_transaction_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresTransactionRepository:
    """Get a TransactionRepository instance."""
    return PostgresTransactionRepository(session)


# Unit of work dependencies
def get_unit_of_work_factory() -> UnitOfWorkFactory:
    """
    Get a factory producing a fresh unit of work per call.

    Every unit of work shares the process-wide customer lock registry.
    """
    return partial(SqlAlchemyUnitOfWork, db_manager.sessionmaker, customer_locks)


def get_transaction_metrics() -> TransactionMetrics | None:
    """Get the transaction metrics sink, or None when metrics are disabled."""
    return TransactionMetrics() if settings.metrics_enabled else None


def get_verification_metrics() -> VerificationMetrics | None:
    """Get the verification metrics sink, or None when metrics are disabled."""
    return VerificationMetrics() if settings.metrics_enabled else None


# Service dependencies
async def get_admin_service(
    customer_repo: Annotated[PostgresCustomerRepository, Depends(get_customer_repository)],
    uow_factory: Annotated[UnitOfWorkFactory, Depends(get_unit_of_work_factory)],
    metrics: Annotated[VerificationMetrics | None, Depends(get_verification_metrics)],
) -> AdminService:
    """Get an AdminService instance."""
    return AdminService(
        customer_repository=customer_repo,
        unit_of_work_factory=uow_factory,
        metrics=metrics,
    )


async def get_profile_service(
    customer_repo: Annotated[PostgresCustomerRepository, Depends(get_customer_repository)],
    tenor_repo: Annotated[PostgresTenorRepository, Depends(get_tenor_repository)],
    limit_repo: Annotated[PostgresLimitRepository, Depends(get_limit_repository)],
    transaction_repo: Annotated[PostgresTransactionRepository, Depends(get_transaction_repository)],
    uow_factory: Annotated[UnitOfWorkFactory, Depends(get_unit_of_work_factory)],
) -> ProfileService:
    """Get a ProfileService instance with all dependencies."""
    return ProfileService(
        customer_repository=customer_repo,
        tenor_repository=tenor_repo,
        limit_repository=limit_repo,
        transaction_repository=transaction_repo,
        unit_of_work_factory=uow_factory,
    )


async def get_partner_service(
    uow_factory: Annotated[UnitOfWorkFactory, Depends(get_unit_of_work_factory)],
    metrics: Annotated[TransactionMetrics | None, Depends(get_transaction_metrics)],
) -> PartnerService:
    """Get a PartnerService instance."""
    return PartnerService(
        unit_of_work_factory=uow_factory,
        metrics=metrics,
        transaction_timeout=settings.transaction_timeout_seconds,
    )
