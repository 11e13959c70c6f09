"""PostgreSQL repository implementation for tenors."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.domain.entities import Tenor
from multifinance.domain.interfaces import TenorRepository
from multifinance.infrastructure.database.models import TenorModel


class PostgresTenorRepository(TenorRepository):
    """PostgreSQL-backed tenor repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_duration(self, duration_months: int) -> Optional[Tenor]:
        stmt = select(TenorModel).where(TenorModel.duration_months == duration_months)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def get_all(self) -> List[Tenor]:
        stmt = select(TenorModel).order_by(TenorModel.duration_months.asc())
        result = await self._session.execute(stmt)

        return [self._to_entity(model) for model in result.scalars().all()]

    def _to_entity(self, model: TenorModel) -> Tenor:
        return Tenor(
            id=model.id,
            duration_months=model.duration_months,
            description=model.description or "",
        )
