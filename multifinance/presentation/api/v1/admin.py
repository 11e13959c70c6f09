"""Back-office endpoints: customer review, verification and limit setting."""

from decimal import Decimal
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query

from multifinance.core.config import settings
from multifinance.core.dependencies import get_admin_service
from multifinance.application.dto import LimitItem, SetLimitsRequest, VerificationRequest
from multifinance.application.services import AdminService
from multifinance.domain.entities import PageParams, VerificationStatus
from multifinance.presentation.schemas import (
    CustomerPageSchema,
    CustomerResponseSchema,
    ErrorResponseSchema,
    SetLimitsRequestSchema,
    SetLimitsResponseSchema,
    VerificationRequestSchema,
)

admin_router = APIRouter(
    prefix="/admin/customers",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Customer not found"},
    },
)

CustomerId = Annotated[int, Path(ge=1, description="Customer ID")]


@admin_router.get(
    "",
    response_model=CustomerPageSchema,
    summary="List Customers",
    description="List customers ordered by id, optionally by verification status.",
)
async def list_customers(
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[
        int,
        Query(ge=1, le=settings.max_page_size, description="Page size"),
    ] = settings.default_page_size,
    status: Annotated[
        Optional[VerificationStatus],
        Query(description="Only customers in this verification status"),
    ] = None,
    admin_service: Annotated[AdminService, Depends(get_admin_service)] = None,
) -> CustomerPageSchema:
    params = PageParams(
        page=page,
        limit=limit,
        status=status.value if status else None,
    )

    response = await admin_service.list_customers(params)

    return CustomerPageSchema(
        data=[CustomerResponseSchema.from_dto(c) for c in response.data],
        total=response.total,
        page=response.page,
        limit=response.limit,
        total_pages=response.total_pages,
    )


@admin_router.get(
    "/{customer_id}",
    response_model=CustomerResponseSchema,
    summary="Get Customer",
)
async def get_customer(
    customer_id: CustomerId,
    admin_service: Annotated[AdminService, Depends(get_admin_service)],
) -> CustomerResponseSchema:
    response = await admin_service.get_customer(customer_id)
    return CustomerResponseSchema.from_dto(response)


@admin_router.post(
    "/{customer_id}/verify",
    response_model=CustomerResponseSchema,
    summary="Verify Customer",
    description="""
    Record the verification decision for a PENDING customer.

    Only VERIFIED customers may transact. A customer that has already been
    decided cannot be decided again.
    """,
    responses={
        409: {"model": ErrorResponseSchema, "description": "Customer is not pending"},
    },
)
async def verify_customer(
    customer_id: CustomerId,
    request: VerificationRequestSchema,
    admin_service: Annotated[AdminService, Depends(get_admin_service)],
) -> CustomerResponseSchema:
    dto = VerificationRequest(status=request.status, reason=request.reason)

    response = await admin_service.verify_customer(customer_id, dto)
    return CustomerResponseSchema.from_dto(response)


@admin_router.post(
    "/{customer_id}/limits",
    response_model=SetLimitsResponseSchema,
    summary="Set Customer Limits",
    description="""
    Create or replace the customer's limit for each listed tenor.

    Either every limit in the request is applied or none is.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Negative limit amount"},
        404: {"model": ErrorResponseSchema, "description": "Customer or tenor not found"},
    },
)
async def set_limits(
    customer_id: CustomerId,
    request: SetLimitsRequestSchema,
    admin_service: Annotated[AdminService, Depends(get_admin_service)],
) -> SetLimitsResponseSchema:
    dto = SetLimitsRequest(
        limits=[
            LimitItem(
                tenor_months=item.tenor_months,
                limit_amount=Decimal(str(item.limit_amount)),
            )
            for item in request.limits
        ]
    )

    updated = await admin_service.set_limits(customer_id, dto)
    return SetLimitsResponseSchema(updated=updated)
