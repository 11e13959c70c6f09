"""PostgreSQL repository implementation for customer limits."""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.domain.entities import CustomerLimit
from multifinance.domain.interfaces import LimitRepository
from multifinance.infrastructure.database.models import CustomerLimitModel


class PostgresLimitRepository(LimitRepository):
    """PostgreSQL-backed limit repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, customer_id: int, tenor_id: int) -> Optional[CustomerLimit]:
        model = await self._session.get(CustomerLimitModel, (customer_id, tenor_id))

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_customer_id(self, customer_id: int) -> List[CustomerLimit]:
        stmt = (
            select(CustomerLimitModel)
            .where(CustomerLimitModel.customer_id == customer_id)
            .order_by(CustomerLimitModel.tenor_id.asc())
        )
        result = await self._session.execute(stmt)

        return [self._to_entity(model) for model in result.scalars().all()]

    async def upsert_many(self, limits: List[CustomerLimit]) -> None:
        # Row by row keeps this portable across PostgreSQL and SQLite.
        for limit in limits:
            model = await self._session.get(
                CustomerLimitModel, (limit.customer_id, limit.tenor_id)
            )
            if model is None:
                self._session.add(
                    CustomerLimitModel(
                        customer_id=limit.customer_id,
                        tenor_id=limit.tenor_id,
                        limit_amount=limit.limit_amount,
                    )
                )
            else:
                model.limit_amount = limit.limit_amount

        await self._session.flush()

    def _to_entity(self, model: CustomerLimitModel) -> CustomerLimit:
        return CustomerLimit(
            customer_id=model.customer_id,
            tenor_id=model.tenor_id,
            limit_amount=Decimal(str(model.limit_amount)),
        )
