"""Data transfer objects for customer onboarding and administration."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List, Optional

NIK_LENGTH = 16


def format_timestamp(value: datetime) -> str:
    """ISO 8601 in UTC with a Z suffix, for naive (UTC) or aware values."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat() + "Z"


@dataclass(frozen=True)
class RegisterCustomerRequest:
    """Input data for registering a new customer."""

    nik: str
    full_name: str
    legal_name: str
    birth_place: str
    birth_date: date
    salary: Decimal
    ktp_photo_url: str
    selfie_photo_url: str

    def validate(self) -> List[str]:
        errors = []

        if len(self.nik) != NIK_LENGTH or not self.nik.isdigit():
            errors.append(f"nik must be {NIK_LENGTH} digits")

        for name in ("full_name", "legal_name", "birth_place", "ktp_photo_url", "selfie_photo_url"):
            if not getattr(self, name).strip():
                errors.append(f"{name} is required")

        if self.salary <= 0:
            errors.append("salary must be positive")

        return errors


@dataclass(frozen=True)
class UpdateProfileRequest:
    """Fields a customer may change on their own profile."""

    full_name: str
    salary: Decimal

    def validate(self) -> List[str]:
        errors = []

        if not self.full_name.strip():
            errors.append("full_name is required")

        if self.salary <= 0:
            errors.append("salary must be positive")

        return errors


@dataclass(frozen=True)
class VerificationRequest:
    """Administrator decision on a pending customer."""

    status: str
    reason: Optional[str] = None


@dataclass(frozen=True)
class CustomerResponse:
    """Response data for a customer."""

    id: int
    nik: str
    full_name: str
    legal_name: str
    birth_place: str
    birth_date: str
    salary: Decimal
    ktp_photo_url: str
    selfie_photo_url: str
    verification_status: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            nik=customer.nik,
            full_name=customer.full_name,
            legal_name=customer.legal_name,
            birth_place=customer.birth_place,
            birth_date=customer.birth_date.isoformat(),
            salary=customer.salary,
            ktp_photo_url=customer.ktp_photo_url,
            selfie_photo_url=customer.selfie_photo_url,
            verification_status=customer.verification_status.value,
            created_at=format_timestamp(customer.created_at),
            updated_at=format_timestamp(customer.updated_at),
        )
