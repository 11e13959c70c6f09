"""Customer self-service endpoints: registration, profile, limits, history."""

from decimal import Decimal
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query

from multifinance.core.config import settings
from multifinance.core.dependencies import get_profile_service
from multifinance.application.dto import RegisterCustomerRequest, UpdateProfileRequest
from multifinance.application.services import ProfileService
from multifinance.domain.entities import PageParams, TransactionStatus
from multifinance.presentation.schemas import (
    CustomerResponseSchema,
    ErrorResponseSchema,
    LimitDetailSchema,
    RegisterCustomerRequestSchema,
    TransactionPageSchema,
    TransactionResponseSchema,
    UpdateProfileRequestSchema,
)

customer_router = APIRouter(
    prefix="/customers",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Customer not found"},
    },
)

CustomerId = Annotated[int, Path(ge=1, description="Customer ID")]


@customer_router.post(
    "",
    response_model=CustomerResponseSchema,
    status_code=201,
    summary="Register Customer",
    description="""
    Register a new customer from their KTP data.

    The customer starts in PENDING status and cannot transact until an
    administrator verifies them.
    """,
    responses={
        201: {"description": "Customer registered"},
        409: {"model": ErrorResponseSchema, "description": "NIK already registered"},
    },
)
async def register_customer(
    request: RegisterCustomerRequestSchema,
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
) -> CustomerResponseSchema:
    dto = RegisterCustomerRequest(
        nik=request.nik,
        full_name=request.full_name,
        legal_name=request.legal_name,
        birth_place=request.birth_place,
        birth_date=request.birth_date,
        salary=Decimal(str(request.salary)),
        ktp_photo_url=request.ktp_photo_url,
        selfie_photo_url=request.selfie_photo_url,
    )

    response = await profile_service.register(dto)
    return CustomerResponseSchema.from_dto(response)


@customer_router.get(
    "/{customer_id}/profile",
    response_model=CustomerResponseSchema,
    summary="Get Profile",
)
async def get_profile(
    customer_id: CustomerId,
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
) -> CustomerResponseSchema:
    response = await profile_service.get_profile(customer_id)
    return CustomerResponseSchema.from_dto(response)


@customer_router.put(
    "/{customer_id}/profile",
    response_model=CustomerResponseSchema,
    summary="Update Profile",
    description="Update the customer's full name and monthly salary.",
)
async def update_profile(
    customer_id: CustomerId,
    request: UpdateProfileRequestSchema,
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
) -> CustomerResponseSchema:
    dto = UpdateProfileRequest(
        full_name=request.full_name,
        salary=Decimal(str(request.salary)),
    )

    response = await profile_service.update_profile(customer_id, dto)
    return CustomerResponseSchema.from_dto(response)


@customer_router.get(
    "/{customer_id}/limits",
    response_model=list[LimitDetailSchema],
    summary="Get Limits",
    description="""
    List the customer's limit for every tenor that has one, together with
    the principal used by active transactions and the remaining amount.
    """,
)
async def get_limits(
    customer_id: CustomerId,
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
) -> list[LimitDetailSchema]:
    details = await profile_service.get_limits(customer_id)
    return [LimitDetailSchema.from_dto(d) for d in details]


@customer_router.get(
    "/{customer_id}/transactions",
    response_model=TransactionPageSchema,
    summary="List Transactions",
    description="List the customer's transactions, newest first.",
)
async def list_transactions(
    customer_id: CustomerId,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[
        int,
        Query(ge=1, le=settings.max_page_size, description="Page size"),
    ] = settings.default_page_size,
    status: Annotated[
        Optional[TransactionStatus],
        Query(description="Only transactions in this status"),
    ] = None,
    profile_service: Annotated[ProfileService, Depends(get_profile_service)] = None,
) -> TransactionPageSchema:
    params = PageParams(
        page=page,
        limit=limit,
        status=status.value if status else None,
    )

    response = await profile_service.list_transactions(customer_id, params)

    return TransactionPageSchema(
        data=[TransactionResponseSchema.from_dto(t) for t in response.data],
        total=response.total,
        page=response.page,
        limit=response.limit,
        total_pages=response.total_pages,
    )
