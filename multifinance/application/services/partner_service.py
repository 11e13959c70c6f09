"""Partner service - books transactions against customer tenor limits."""

import asyncio
from contextlib import nullcontext
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import structlog

from multifinance.core.metrics import TransactionMetrics
from multifinance.domain.entities import (
    Customer,
    Tenor,
    Transaction,
    TransactionStatus,
)
from multifinance.domain.exceptions import (
    CustomerNotFoundException,
    CustomerNotVerifiedException,
    DomainException,
    InsufficientLimitException,
    InvalidRequestException,
    LimitNotSetException,
    TenorNotFoundException,
    TransactionTimeoutException,
)
from multifinance.domain.interfaces import UnitOfWork
from multifinance.application.dto import (
    CheckLimitRequest,
    CheckLimitResponse,
    CreateTransactionRequest,
    TransactionResponse,
)
from multifinance.service.financing import (
    FinancingSettings,
    calculate_interest,
    calculate_principal,
    calculate_remaining_limit,
    financing_settings,
    generate_contract_number,
    has_sufficient_limit,
    to_money,
)

logger = structlog.get_logger(__name__)

UnitOfWorkFactory = Callable[..., UnitOfWork]


class _Booking:
    """Outcome of one booking, filled in once its commit has returned."""

    def __init__(self):
        self.transaction: Optional[Transaction] = None
        self.tenor: Optional[Tenor] = None

    @property
    def committed(self) -> bool:
        return self.transaction is not None


class PartnerService:
    """
    Application service for partner-facing use cases.

    ``create_transaction`` is the only writer of transactions. It holds the
    customer's lock from the moment the customer is read until the new
    transaction is committed or rolled back, so concurrent requests for the
    same customer are applied one at a time and the sum of ACTIVE principal
    never exceeds the limit. ``check_limit`` reads the same figures without
    the lock and is advisory only.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        metrics: Optional[TransactionMetrics] = None,
        financing: Optional[FinancingSettings] = None,
        transaction_timeout: Optional[float] = None,
    ):
        self._uow_factory = unit_of_work_factory
        self._metrics = metrics
        self._financing = financing or financing_settings
        self._timeout = transaction_timeout

    async def create_transaction(
        self,
        request: CreateTransactionRequest,
        timeout: Optional[float] = None,
    ) -> TransactionResponse:
        """
        Book a new ACTIVE transaction if the customer's limit allows it.

        Args:
            request: Customer NIK, tenor, asset and amounts
            timeout: Seconds allowed for the unit of work up to and
                including commit, lock wait included. Past it an uncommitted
                booking is abandoned and rolled back. A deadline that passes
                once the commit has returned does not fail the request.

        Returns:
            TransactionResponse for the committed transaction

        Raises:
            InvalidRequestException: If request validation fails
            CustomerNotFoundException: If no customer has the NIK
            CustomerNotVerifiedException: If the customer is not VERIFIED
            TenorNotFoundException: If no tenor has the duration
            LimitNotSetException: If no limit is set for the tenor
            InsufficientLimitException: If principal exceeds the remaining limit
            TransactionTimeoutException: If the deadline passes before commit
            InfrastructureException: If storage fails
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        timeout = timeout if timeout is not None else self._timeout

        log = logger.bind(
            customer_nik=request.customer_nik,
            tenor_months=request.tenor_months,
            otr_amount=str(request.otr_amount),
            admin_fee=str(request.admin_fee),
        )
        log.info("transaction_requested")

        booking = _Booking()
        tracker = self._metrics.track_latency() if self._metrics else nullcontext()
        try:
            with tracker:
                await asyncio.wait_for(
                    self._book_transaction(request, booking),
                    timeout=timeout,
                )
        except asyncio.TimeoutError:
            if not booking.committed:
                log.warning("transaction_timed_out", timeout=timeout)
                self._record_rejected("timeout")
                raise TransactionTimeoutException("create_transaction", timeout) from None
            log.warning("transaction_cleanup_timed_out", timeout=timeout)
        except DomainException as exc:
            if not booking.committed:
                log.info("transaction_rejected", code=exc.code, reason=exc.message)
                self._record_rejected(exc.code.lower())
                raise
            log.warning("transaction_cleanup_failed", code=exc.code, reason=exc.message)

        transaction, tenor = booking.transaction, booking.tenor

        if self._metrics:
            self._metrics.record_created(tenor.duration_months, transaction.principal)

        log.info(
            "transaction_created",
            transaction_id=transaction.id,
            contract_number=transaction.contract_number,
            total_interest=str(transaction.total_interest),
            total_installment=str(transaction.total_installment_amount),
        )

        return TransactionResponse.from_entity(transaction)

    async def check_limit(self, request: CheckLimitRequest) -> CheckLimitResponse:
        """
        Preview whether a transaction amount fits the remaining limit.

        Uses plain reads and takes no lock, so a concurrent transaction can
        change the outcome before a real transaction is attempted.

        Raises:
            InvalidRequestException: If request validation fails
            CustomerNotFoundException: If no customer has the NIK
            CustomerNotVerifiedException: If the customer is not VERIFIED
            TenorNotFoundException: If no tenor has the duration
            LimitNotSetException: If no limit is set for the tenor
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        async with self._uow_factory(operation="check_limit") as uow:
            customer = await uow.customers.get_by_nik(request.customer_nik)
            self._ensure_can_transact(customer, request.customer_nik)

            tenor = await self._resolve_tenor(uow, request.tenor_months)
            remaining = await self._remaining_limit(uow, customer, tenor)

        requested = to_money(request.transaction_amount)

        if has_sufficient_limit(remaining, requested):
            response = CheckLimitResponse(
                status=CheckLimitResponse.APPROVED,
                message="Limit is sufficient.",
                remaining_limit=remaining,
            )
        else:
            response = CheckLimitResponse(
                status=CheckLimitResponse.REJECTED,
                message="Insufficient limit for this transaction.",
                remaining_limit=remaining,
            )

        if self._metrics:
            self._metrics.record_limit_check(response.status)

        logger.info(
            "limit_check_completed",
            customer_nik=request.customer_nik,
            tenor_months=request.tenor_months,
            requested=str(requested),
            remaining=str(remaining),
            status=response.status,
        )

        return response

    async def _book_transaction(
        self,
        request: CreateTransactionRequest,
        booking: "_Booking",
    ) -> None:
        """Run the locked read-check-write sequence in one unit of work."""
        async with self._uow_factory(operation="create_transaction") as uow:
            # Every read below happens under this lock.
            customer = await uow.customers.get_by_nik_for_update(request.customer_nik)
            self._ensure_can_transact(customer, request.customer_nik)

            tenor = await self._resolve_tenor(uow, request.tenor_months)
            remaining = await self._remaining_limit(uow, customer, tenor)

            principal = calculate_principal(request.otr_amount, request.admin_fee)
            if not has_sufficient_limit(remaining, principal):
                raise InsufficientLimitException(remaining=remaining, requested=principal)

            otr_amount = to_money(request.otr_amount)
            interest = calculate_interest(otr_amount, tenor.duration_months, self._financing)

            transaction = Transaction(
                contract_number=generate_contract_number(settings=self._financing),
                customer_id=customer.id,
                tenor_id=tenor.id,
                asset_name=request.asset_name.strip(),
                otr_amount=otr_amount,
                admin_fee=to_money(request.admin_fee),
                total_interest=interest,
                total_installment_amount=principal + interest,
                status=TransactionStatus.ACTIVE,
                transaction_date=datetime.utcnow(),
            )

            await uow.transactions.save(transaction)
            await uow.commit()
            booking.transaction, booking.tenor = transaction, tenor

    def _ensure_can_transact(self, customer: Optional[Customer], nik: str) -> Customer:
        if customer is None:
            raise CustomerNotFoundException(nik)
        if not customer.is_verified:
            raise CustomerNotVerifiedException(nik)
        return customer

    async def _resolve_tenor(self, uow: UnitOfWork, tenor_months: int) -> Tenor:
        tenor = await uow.tenors.get_by_duration(tenor_months)
        if tenor is None:
            raise TenorNotFoundException(tenor_months)
        return tenor

    async def _remaining_limit(
        self,
        uow: UnitOfWork,
        customer: Customer,
        tenor: Tenor,
    ) -> Decimal:
        limit = await uow.limits.get(customer.id, tenor.id)
        if limit is None:
            raise LimitNotSetException(tenor.duration_months)

        used = await uow.transactions.sum_active_principal(customer.id, tenor.id)
        return calculate_remaining_limit(limit.limit_amount, used)

    def _record_rejected(self, reason: str) -> None:
        if self._metrics:
            self._metrics.record_rejected(reason)
