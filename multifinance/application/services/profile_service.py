"""Profile service - customer self-service use cases."""

from typing import Callable, List

import structlog

from multifinance.domain.entities import Customer, LimitUsage, PageParams, VerificationStatus
from multifinance.domain.exceptions import (
    CustomerAlreadyRegisteredException,
    CustomerNotFoundException,
    InvalidRequestException,
)
from multifinance.domain.interfaces import (
    CustomerRepository,
    LimitRepository,
    TenorRepository,
    TransactionRepository,
    UnitOfWork,
)
from multifinance.application.dto import (
    CustomerResponse,
    LimitDetailResponse,
    PageResponse,
    RegisterCustomerRequest,
    TransactionResponse,
    UpdateProfileRequest,
)
from multifinance.service.financing import to_money

logger = structlog.get_logger(__name__)


class ProfileService:
    """
    Application service for customer profile use cases.

    Handles registration, profile reads and updates, and the customer's
    view of their limits and transactions.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        tenor_repository: TenorRepository,
        limit_repository: LimitRepository,
        transaction_repository: TransactionRepository,
        unit_of_work_factory: Callable[..., UnitOfWork],
    ):
        self._customer_repo = customer_repository
        self._tenor_repo = tenor_repository
        self._limit_repo = limit_repository
        self._transaction_repo = transaction_repository
        self._uow_factory = unit_of_work_factory

    async def register(self, request: RegisterCustomerRequest) -> CustomerResponse:
        """
        Register a new customer in PENDING state.

        Raises:
            InvalidRequestException: If request validation fails
            CustomerAlreadyRegisteredException: If the NIK is taken
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        async with self._uow_factory(operation="register_customer") as uow:
            existing = await uow.customers.get_by_nik(request.nik)
            if existing is not None:
                logger.warning("customer_already_registered", nik=request.nik)
                raise CustomerAlreadyRegisteredException(request.nik)

            customer = Customer(
                nik=request.nik,
                full_name=request.full_name.strip(),
                legal_name=request.legal_name.strip(),
                birth_place=request.birth_place.strip(),
                birth_date=request.birth_date,
                salary=to_money(request.salary),
                ktp_photo_url=request.ktp_photo_url,
                selfie_photo_url=request.selfie_photo_url,
                verification_status=VerificationStatus.PENDING,
            )
            await uow.customers.save(customer)
            await uow.commit()

        logger.info("customer_registered", customer_id=customer.id, nik=customer.nik)

        return CustomerResponse.from_entity(customer)

    async def get_profile(self, customer_id: int) -> CustomerResponse:
        customer = await self._customer_repo.get_by_id(customer_id)

        if customer is None:
            raise CustomerNotFoundException(str(customer_id))

        return CustomerResponse.from_entity(customer)

    async def update_profile(
        self,
        customer_id: int,
        request: UpdateProfileRequest,
    ) -> CustomerResponse:
        """
        Update the customer's full name and salary.

        Raises:
            InvalidRequestException: If request validation fails
            CustomerNotFoundException: If customer not found
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        async with self._uow_factory(operation="update_profile") as uow:
            customer = await uow.customers.get_by_id(customer_id)
            if customer is None:
                raise CustomerNotFoundException(str(customer_id))

            customer.full_name = request.full_name.strip()
            customer.salary = to_money(request.salary)
            await uow.customers.update(customer)
            await uow.commit()

        logger.info("customer_profile_updated", customer_id=customer_id)

        return CustomerResponse.from_entity(customer)

    async def get_limits(self, customer_id: int) -> List[LimitDetailResponse]:
        """
        Report limit, used amount and remaining limit per tenor.

        Raises:
            CustomerNotFoundException: If customer not found
        """
        customer = await self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundException(str(customer_id))

        limits = await self._limit_repo.get_by_customer_id(customer_id)
        tenor_months = {tenor.id: tenor.duration_months for tenor in await self._tenor_repo.get_all()}

        details = []
        for limit in limits:
            used = await self._transaction_repo.sum_active_principal(customer_id, limit.tenor_id)
            usage = LimitUsage(
                tenor_months=tenor_months[limit.tenor_id],
                limit_amount=limit.limit_amount,
                used_amount=used,
            )
            details.append(LimitDetailResponse.from_usage(usage))

        details.sort(key=lambda detail: detail.tenor_months)

        logger.info("customer_limits_retrieved", customer_id=customer_id, count=len(details))

        return details

    async def list_transactions(
        self,
        customer_id: int,
        params: PageParams,
    ) -> PageResponse[TransactionResponse]:
        """
        List the customer's transactions, newest first.

        Raises:
            CustomerNotFoundException: If customer not found
        """
        customer = await self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundException(str(customer_id))

        page = await self._transaction_repo.list_by_customer_id(customer_id, params)

        logger.info(
            "customer_transactions_listed",
            customer_id=customer_id,
            page=params.page,
            total=page.total,
        )

        return PageResponse.from_page(page, TransactionResponse.from_entity)
