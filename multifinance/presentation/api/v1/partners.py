"""Partner endpoints: book transactions and preview limits."""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends

from multifinance.core.dependencies import get_partner_service
from multifinance.application.dto import CheckLimitRequest, CreateTransactionRequest
from multifinance.application.services import PartnerService
from multifinance.presentation.schemas import (
    CheckLimitRequestSchema,
    CheckLimitResponseSchema,
    CreateTransactionRequestSchema,
    ErrorResponseSchema,
    TransactionResponseSchema,
)

partner_router = APIRouter(
    prefix="/partners",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Customer, tenor or limit not found"},
        422: {"model": ErrorResponseSchema, "description": "Customer not verified"},
    },
)


@partner_router.post(
    "/transactions",
    response_model=TransactionResponseSchema,
    status_code=201,
    summary="Create Transaction",
    description="""
    Book a financing transaction against the customer's limit for the tenor.

    The principal (OTR + admin fee) must not exceed the remaining limit.
    Interest is 2% of OTR per month of tenor.
    """,
    responses={
        201: {"description": "Transaction booked"},
        503: {"model": ErrorResponseSchema, "description": "Transaction timed out"},
    },
)
async def create_transaction(
    request: CreateTransactionRequestSchema,
    partner_service: Annotated[PartnerService, Depends(get_partner_service)],
) -> TransactionResponseSchema:
    dto = CreateTransactionRequest(
        customer_nik=request.customer_nik,
        tenor_months=request.tenor_months,
        asset_name=request.asset_name,
        otr_amount=Decimal(str(request.otr_amount)),
        admin_fee=Decimal(str(request.admin_fee)),
    )

    response = await partner_service.create_transaction(dto)
    return TransactionResponseSchema.from_dto(response)


@partner_router.post(
    "/check-limit",
    response_model=CheckLimitResponseSchema,
    summary="Check Limit",
    description="""
    Preview whether an amount fits the customer's remaining limit.

    Nothing is reserved; a later transaction can still be rejected.
    """,
)
async def check_limit(
    request: CheckLimitRequestSchema,
    partner_service: Annotated[PartnerService, Depends(get_partner_service)],
) -> CheckLimitResponseSchema:
    dto = CheckLimitRequest(
        customer_nik=request.customer_nik,
        tenor_months=request.tenor_months,
        transaction_amount=Decimal(str(request.transaction_amount)),
    )

    response = await partner_service.check_limit(dto)

    return CheckLimitResponseSchema(
        status=response.status,
        message=response.message,
        remaining_limit=float(response.remaining_limit),
    )
