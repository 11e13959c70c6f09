"""PostgreSQL implementation of CustomerRepository."""

from datetime import datetime
from decimal import Decimal
from typing import Awaitable, Callable, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.domain.entities import Customer, Page, PageParams, VerificationStatus
from multifinance.domain.exceptions import CustomerAlreadyRegisteredException
from multifinance.domain.interfaces import CustomerRepository
from multifinance.infrastructure.database.models import CustomerModel

RowLockHook = Callable[[str], Awaitable[None]]

NIK_CONSTRAINT = "uq_customers_nik"


def _is_nik_conflict(exc: IntegrityError) -> bool:
    # PostgreSQL names the constraint, SQLite names the column.
    detail = str(exc.orig)
    return NIK_CONSTRAINT in detail or "customers.nik" in detail


class PostgresCustomerRepository(CustomerRepository):
    """
    PostgreSQL implementation of the Customer repository.

    Uses SQLAlchemy async session for database operations.

    Args:
        session: Session the repository reads and writes through
        row_lock: Called with the NIK before a locking read. A unit of work
            passes a hook that takes an in-process lock for the rest of its
            lifetime, which keeps the read-check-write sequence exclusive on
            backends where ``FOR UPDATE`` is a no-op.
    """

    def __init__(self, session: AsyncSession, row_lock: RowLockHook | None = None):
        self._session = session
        self._row_lock = row_lock

    async def save(self, customer: Customer) -> Customer:
        """
        Persist a customer to the database.

        Raises:
            CustomerAlreadyRegisteredException: If another customer already
                holds the NIK, including one committed after the caller checked
        """
        model = CustomerModel(
            nik=customer.nik,
            full_name=customer.full_name,
            legal_name=customer.legal_name,
            birth_place=customer.birth_place,
            birth_date=customer.birth_date,
            salary=customer.salary,
            ktp_photo_url=customer.ktp_photo_url,
            selfie_photo_url=customer.selfie_photo_url,
            verification_status=customer.verification_status.value,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )

        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if not _is_nik_conflict(exc):
                raise
            raise CustomerAlreadyRegisteredException(customer.nik) from exc

        customer.id = model.id
        return customer

    async def update(self, customer: Customer) -> Customer:
        """Update mutable fields of an existing customer."""
        model = await self._session.get(CustomerModel, customer.id)

        if model is None:
            raise ValueError(f"Customer {customer.id} not found")

        model.full_name = customer.full_name
        model.salary = customer.salary
        model.verification_status = customer.verification_status.value
        model.updated_at = datetime.utcnow()

        await self._session.flush()

        customer.updated_at = model.updated_at
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Retrieve a customer by ID."""
        model = await self._session.get(CustomerModel, customer_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_nik(self, nik: str) -> Optional[Customer]:
        """Retrieve a customer by NIK without locking."""
        stmt = select(CustomerModel).where(CustomerModel.nik == nik)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_nik_for_update(self, nik: str) -> Optional[Customer]:
        """Retrieve a customer by NIK holding an exclusive row lock."""
        if self._row_lock is not None:
            await self._row_lock(nik)

        stmt = (
            select(CustomerModel)
            .where(CustomerModel.nik == nik)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list(self, params: PageParams) -> Page[Customer]:
        """Retrieve a page of customers ordered by id."""
        stmt = select(CustomerModel)
        count_stmt = select(func.count()).select_from(CustomerModel)

        if params.status:
            stmt = stmt.where(CustomerModel.verification_status == params.status)
            count_stmt = count_stmt.where(CustomerModel.verification_status == params.status)

        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = stmt.order_by(CustomerModel.id.asc()).limit(params.limit).offset(params.offset)
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return Page(
            total=total,
            page=params.page,
            limit=params.limit,
            data=[self._to_entity(model) for model in models],
        )

    def _to_entity(self, model: CustomerModel) -> Customer:
        """Convert database model to domain entity."""
        return Customer(
            id=model.id,
            nik=model.nik,
            full_name=model.full_name,
            legal_name=model.legal_name,
            birth_place=model.birth_place,
            birth_date=model.birth_date,
            salary=Decimal(str(model.salary)),
            ktp_photo_url=model.ktp_photo_url,
            selfie_photo_url=model.selfie_photo_url,
            verification_status=VerificationStatus(model.verification_status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
