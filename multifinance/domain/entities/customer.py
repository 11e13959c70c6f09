"""Customer entity representing a registered borrower."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class VerificationStatus(str, Enum):
    """KYC verification state of a customer."""

    PENDING = "PENDING"
    VERIFIED = "VERIFIED"
    REJECTED = "REJECTED"


@dataclass
class Customer:
    """
    A borrower identified by their national ID (NIK).

    Customers start as PENDING and are moved once, by an administrator,
    to VERIFIED or REJECTED. Only verified customers may transact.
    """

    nik: str
    full_name: str
    legal_name: str
    birth_place: str
    birth_date: date
    salary: Decimal
    ktp_photo_url: str
    selfie_photo_url: str
    verification_status: VerificationStatus = VerificationStatus.PENDING
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_verified(self) -> bool:
        return self.verification_status == VerificationStatus.VERIFIED

    @property
    def is_pending(self) -> bool:
        return self.verification_status == VerificationStatus.PENDING
