"""Reference data seeding."""

from typing import Iterable

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.infrastructure.database.models import TenorModel

logger = structlog.get_logger(__name__)


async def seed_tenors(session: AsyncSession, durations: Iterable[int]) -> int:
    """
    Insert any missing tenors.

    Existing rows are left untouched, so this is safe to run on every start.

    Returns:
        Number of tenors inserted
    """
    result = await session.execute(select(TenorModel.duration_months))
    existing = set(result.scalars().all())

    inserted = 0
    for months in durations:
        if months in existing:
            continue
        session.add(TenorModel(duration_months=months, description=f"{months} Bulan"))
        inserted += 1

    await session.flush()

    if inserted:
        logger.info("tenors_seeded", inserted=inserted)

    return inserted
