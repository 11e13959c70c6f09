"""PostgreSQL implementation of TransactionRepository."""

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.domain.entities import (
    Page,
    PageParams,
    Transaction,
    TransactionStatus,
)
from multifinance.domain.interfaces import TransactionRepository
from multifinance.infrastructure.database.models import TransactionModel
from multifinance.service.financing import to_money


class PostgresTransactionRepository(TransactionRepository):
    """
    PostgreSQL implementation of the Transaction repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, transaction: Transaction) -> Transaction:
        """Persist a transaction to the database."""
        model = TransactionModel(
            contract_number=transaction.contract_number,
            customer_id=transaction.customer_id,
            tenor_id=transaction.tenor_id,
            asset_name=transaction.asset_name,
            otr_amount=transaction.otr_amount,
            admin_fee=transaction.admin_fee,
            total_interest=transaction.total_interest,
            total_installment_amount=transaction.total_installment_amount,
            status=transaction.status.value,
            transaction_date=transaction.transaction_date,
        )

        self._session.add(model)
        await self._session.flush()

        transaction.id = model.id
        return transaction

    async def sum_active_principal(self, customer_id: int, tenor_id: int) -> Decimal:
        """Sum OTR amount plus admin fee over ACTIVE transactions."""
        stmt = select(
            func.coalesce(
                func.sum(TransactionModel.otr_amount + TransactionModel.admin_fee),
                0,
            )
        ).where(
            TransactionModel.customer_id == customer_id,
            TransactionModel.tenor_id == tenor_id,
            TransactionModel.status == TransactionStatus.ACTIVE.value,
        )
        result = await self._session.execute(stmt)

        return to_money(result.scalar_one())

    async def list_by_customer_id(
        self,
        customer_id: int,
        params: PageParams,
    ) -> Page[Transaction]:
        """Retrieve a page of transactions, newest first."""
        stmt = select(TransactionModel).where(TransactionModel.customer_id == customer_id)
        count_stmt = (
            select(func.count())
            .select_from(TransactionModel)
            .where(TransactionModel.customer_id == customer_id)
        )

        if params.status:
            stmt = stmt.where(TransactionModel.status == params.status)
            count_stmt = count_stmt.where(TransactionModel.status == params.status)

        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            stmt.order_by(
                TransactionModel.transaction_date.desc(),
                TransactionModel.id.desc(),
            )
            .limit(params.limit)
            .offset(params.offset)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return Page(
            total=total,
            page=params.page,
            limit=params.limit,
            data=[self._to_entity(model) for model in models],
        )

    def _to_entity(self, model: TransactionModel) -> Transaction:
        """Convert database model to domain entity."""
        return Transaction(
            id=model.id,
            contract_number=model.contract_number,
            customer_id=model.customer_id,
            tenor_id=model.tenor_id,
            asset_name=model.asset_name,
            otr_amount=to_money(model.otr_amount),
            admin_fee=to_money(model.admin_fee),
            total_interest=to_money(model.total_interest),
            total_installment_amount=to_money(model.total_installment_amount),
            status=TransactionStatus(model.status),
            transaction_date=model.transaction_date,
        )
