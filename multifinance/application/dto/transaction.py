"""Data transfer objects for partner transactions."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List

from .customer import format_timestamp


@dataclass(frozen=True)
class CreateTransactionRequest:
    """Input data for booking a transaction against a customer's limit."""

    customer_nik: str
    tenor_months: int
    asset_name: str
    otr_amount: Decimal
    admin_fee: Decimal

    def validate(self) -> List[str]:
        errors = []

        if not self.customer_nik or not self.customer_nik.strip():
            errors.append("customer_nik is required")

        if self.tenor_months <= 0:
            errors.append("tenor_months must be positive")

        if not self.asset_name or not self.asset_name.strip():
            errors.append("asset_name is required")

        if self.otr_amount <= 0:
            errors.append("otr_amount must be positive")

        if self.admin_fee < 0:
            errors.append("admin_fee cannot be negative")

        return errors


@dataclass(frozen=True)
class CheckLimitRequest:
    """Input data for previewing a transaction against the limit."""

    customer_nik: str
    tenor_months: int
    transaction_amount: Decimal

    def validate(self) -> List[str]:
        errors = []

        if not self.customer_nik or not self.customer_nik.strip():
            errors.append("customer_nik is required")

        if self.tenor_months <= 0:
            errors.append("tenor_months must be positive")

        if self.transaction_amount <= 0:
            errors.append("transaction_amount must be positive")

        return errors


@dataclass(frozen=True)
class CheckLimitResponse:
    """
    Outcome of a limit preview.

    Advisory only: a concurrent transaction may consume the limit
    between this check and a real transaction attempt.
    """

    APPROVED = "approved"
    REJECTED = "rejected"

    status: str
    message: str
    remaining_limit: Decimal

    @property
    def approved(self) -> bool:
        return self.status == self.APPROVED


@dataclass(frozen=True)
class TransactionResponse:
    """Response data for a booked transaction."""

    id: int
    contract_number: str
    customer_id: int
    tenor_id: int
    asset_name: str
    otr_amount: Decimal
    admin_fee: Decimal
    total_interest: Decimal
    total_installment_amount: Decimal
    status: str
    transaction_date: str

    @classmethod
    def from_entity(cls, transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            contract_number=transaction.contract_number,
            customer_id=transaction.customer_id,
            tenor_id=transaction.tenor_id,
            asset_name=transaction.asset_name,
            otr_amount=transaction.otr_amount,
            admin_fee=transaction.admin_fee,
            total_interest=transaction.total_interest,
            total_installment_amount=transaction.total_installment_amount,
            status=transaction.status.value,
            transaction_date=format_timestamp(transaction.transaction_date),
        )
