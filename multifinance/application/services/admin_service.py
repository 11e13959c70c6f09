"""Admin service - customer review and limit administration."""

from typing import Callable, List, Optional

import structlog

from multifinance.core.metrics import VerificationMetrics
from multifinance.domain.entities import CustomerLimit, PageParams, VerificationStatus
from multifinance.domain.exceptions import (
    CustomerNotFoundException,
    InvalidLimitAmountException,
    InvalidRequestException,
    InvalidVerificationStateException,
    TenorNotFoundException,
)
from multifinance.domain.interfaces import CustomerRepository, UnitOfWork
from multifinance.application.dto import (
    CustomerResponse,
    PageResponse,
    SetLimitsRequest,
    VerificationRequest,
)
from multifinance.service.financing import to_money

logger = structlog.get_logger(__name__)

VERIFICATION_OUTCOMES = {VerificationStatus.VERIFIED.value, VerificationStatus.REJECTED.value}


class AdminService:
    """
    Application service for administrator use cases.

    Handles customer listing, verification decisions and limit setting.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        unit_of_work_factory: Callable[..., UnitOfWork],
        metrics: Optional[VerificationMetrics] = None,
    ):
        self._customer_repo = customer_repository
        self._uow_factory = unit_of_work_factory
        self._metrics = metrics

    async def list_customers(self, params: PageParams) -> PageResponse[CustomerResponse]:
        """
        List customers, optionally filtered by verification status.

        Args:
            params: Page, page size and status filter

        Returns:
            PageResponse of customers ordered by id
        """
        page = await self._customer_repo.list(params)

        logger.info(
            "customers_listed",
            page=params.page,
            limit=params.limit,
            status=params.status,
            total=page.total,
        )

        return PageResponse.from_page(page, CustomerResponse.from_entity)

    async def get_customer(self, customer_id: int) -> CustomerResponse:
        """
        Get a customer by ID.

        Raises:
            CustomerNotFoundException: If customer not found
        """
        customer = await self._customer_repo.get_by_id(customer_id)

        if customer is None:
            logger.warning("customer_not_found", customer_id=customer_id)
            raise CustomerNotFoundException(str(customer_id))

        return CustomerResponse.from_entity(customer)

    async def verify_customer(
        self,
        customer_id: int,
        request: VerificationRequest,
    ) -> CustomerResponse:
        """
        Move a PENDING customer to VERIFIED or REJECTED.

        Args:
            customer_id: The customer's identifier
            request: Target status and optional reason

        Returns:
            The updated customer

        Raises:
            InvalidRequestException: If the target status is not VERIFIED or REJECTED
            CustomerNotFoundException: If customer not found
            InvalidVerificationStateException: If the customer is not PENDING
        """
        if request.status not in VERIFICATION_OUTCOMES:
            raise InvalidRequestException("status must be VERIFIED or REJECTED")

        async with self._uow_factory(operation="verify_customer") as uow:
            customer = await uow.customers.get_by_id(customer_id)
            if customer is None:
                raise CustomerNotFoundException(str(customer_id))

            if not customer.is_pending:
                raise InvalidVerificationStateException(customer.verification_status.value)

            customer.verification_status = VerificationStatus(request.status)
            await uow.customers.update(customer)
            await uow.commit()

        if self._metrics:
            self._metrics.record_verification(request.status)
        logger.info(
            "customer_verified",
            customer_id=customer_id,
            status=request.status,
            reason=request.reason,
        )

        return CustomerResponse.from_entity(customer)

    async def set_limits(self, customer_id: int, request: SetLimitsRequest) -> int:
        """
        Set a customer's limits for one or more tenors.

        All items are validated before anything is written; a single bad
        item leaves every existing limit unchanged.

        Returns:
            Number of limits written

        Raises:
            InvalidRequestException: If request validation fails
            CustomerNotFoundException: If customer not found
            InvalidLimitAmountException: If any limit amount is negative
            TenorNotFoundException: If any tenor duration is unknown
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        async with self._uow_factory(operation="set_limits") as uow:
            customer = await uow.customers.get_by_id(customer_id)
            if customer is None:
                raise CustomerNotFoundException(str(customer_id))

            limits: List[CustomerLimit] = []
            for item in request.limits:
                if item.limit_amount < 0:
                    raise InvalidLimitAmountException(item.tenor_months)

                tenor = await uow.tenors.get_by_duration(item.tenor_months)
                if tenor is None:
                    raise TenorNotFoundException(item.tenor_months)

                limits.append(
                    CustomerLimit(
                        customer_id=customer_id,
                        tenor_id=tenor.id,
                        limit_amount=to_money(item.limit_amount),
                    )
                )

            await uow.limits.upsert_many(limits)
            await uow.commit()

        logger.info(
            "customer_limits_set",
            customer_id=customer_id,
            tenors=[item.tenor_months for item in request.limits],
        )

        return len(limits)
