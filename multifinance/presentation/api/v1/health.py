"""Liveness and database reachability for the multifinance API."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance import __version__
from multifinance.core.config import settings
from multifinance.infrastructure.database import get_db_session

logger = structlog.get_logger(__name__)

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    database: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description=(
        "Reports the service version and whether the database answers. "
        "Returns 503 with status 'degraded' when it does not."
    ),
    responses={503: {"model": HealthResponse}},
)
async def health_check(
    response: Response,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> HealthResponse:
    try:
        await session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as exc:
        logger.warning("health_database_unreachable", error=str(exc))
        database = "unavailable"

    healthy = database == "ok"
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status="healthy" if healthy else "degraded",
        service=settings.app_name,
        version=__version__,
        database=database,
    )
