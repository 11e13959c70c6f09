"""Financing transaction entity."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionStatus(str, Enum):
    """Lifecycle status of a financing transaction."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    ACTIVE = "ACTIVE"
    PAID_OFF = "PAID_OFF"
    CANCELLED = "CANCELLED"


@dataclass
class Transaction:
    """
    A financed purchase booked against a customer's tenor limit.

    Attributes:
        contract_number: Human-readable contract reference
        otr_amount: On-the-road price of the asset
        admin_fee: Administration fee charged on top of the OTR price
        total_interest: Flat interest over the whole tenor
        total_installment_amount: Principal plus interest
    """

    contract_number: str
    customer_id: int
    tenor_id: int
    asset_name: str
    otr_amount: Decimal
    admin_fee: Decimal
    total_interest: Decimal
    total_installment_amount: Decimal
    status: TransactionStatus = TransactionStatus.ACTIVE
    id: Optional[int] = None
    transaction_date: datetime = field(default_factory=datetime.utcnow)

    @property
    def principal(self) -> Decimal:
        """Amount counted against the limit."""
        return self.otr_amount + self.admin_fee
