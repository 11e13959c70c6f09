"""Customer-related Pydantic schemas."""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NIK_PATTERN = r"^\d{16}$"


class RegisterCustomerRequestSchema(BaseModel):
    """Schema for POST /v1/customers request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "nik": "3201010101900001",
                    "full_name": "Budi Santoso",
                    "legal_name": "Budi Santoso",
                    "birth_place": "Bandung",
                    "birth_date": "1990-01-01",
                    "salary": 8500000,
                    "ktp_photo_url": "https://img.example.com/ktp/3201010101900001.jpg",
                    "selfie_photo_url": "https://img.example.com/selfie/3201010101900001.jpg",
                }
            ]
        }
    )

    nik: str = Field(..., pattern=NIK_PATTERN, description="16-digit national ID (NIK)")
    full_name: str = Field(..., min_length=1, max_length=255)
    legal_name: str = Field(..., min_length=1, max_length=255)
    birth_place: str = Field(..., min_length=1, max_length=100)
    birth_date: date = Field(..., description="Date of birth (YYYY-MM-DD)")
    salary: float = Field(..., gt=0, description="Monthly salary")
    ktp_photo_url: str = Field(..., min_length=1, max_length=255, description="Hosted KTP photo URL")
    selfie_photo_url: str = Field(..., min_length=1, max_length=255, description="Hosted selfie URL")

    @field_validator("full_name", "legal_name", "birth_place")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure names are not just whitespace."""
        if not v.strip():
            raise ValueError("value cannot be empty or whitespace")
        return v.strip()


class UpdateProfileRequestSchema(BaseModel):
    """Schema for PUT /v1/customers/{customer_id}/profile request body."""

    full_name: str = Field(..., min_length=1, max_length=255)
    salary: float = Field(..., gt=0)

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("full_name cannot be empty or whitespace")
        return v.strip()


class VerificationRequestSchema(BaseModel):
    """Schema for POST /v1/admin/customers/{customer_id}/verify request body."""

    status: Literal["VERIFIED", "REJECTED"] = Field(
        ...,
        description="Verification decision",
    )
    reason: Optional[str] = Field(None, max_length=500)


class CustomerResponseSchema(BaseModel):
    """Schema for a customer in responses."""

    id: int
    nik: str
    full_name: str
    legal_name: str
    birth_place: str
    birth_date: str = Field(..., description="ISO 8601 date")
    salary: float
    ktp_photo_url: str
    selfie_photo_url: str
    verification_status: str = Field(..., examples=["PENDING"])
    created_at: str
    updated_at: str

    @classmethod
    def from_dto(cls, dto) -> "CustomerResponseSchema":
        return cls(
            id=dto.id,
            nik=dto.nik,
            full_name=dto.full_name,
            legal_name=dto.legal_name,
            birth_place=dto.birth_place,
            birth_date=dto.birth_date,
            salary=float(dto.salary),
            ktp_photo_url=dto.ktp_photo_url,
            selfie_photo_url=dto.selfie_photo_url,
            verification_status=dto.verification_status,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class CustomerPageSchema(BaseModel):
    """Schema for GET /v1/admin/customers response."""

    data: list[CustomerResponseSchema]
    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
