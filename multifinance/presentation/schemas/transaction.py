"""Transaction-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .customer import NIK_PATTERN


class CreateTransactionRequestSchema(BaseModel):
    """Schema for POST /v1/partners/transactions request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "customer_nik": "3201010101900001",
                    "tenor_months": 6,
                    "asset_name": "Honda Vario 125",
                    "otr_amount": 40000,
                    "admin_fee": 1000,
                }
            ]
        }
    )

    customer_nik: str = Field(..., pattern=NIK_PATTERN)
    tenor_months: int = Field(..., gt=0, le=255)
    asset_name: str = Field(..., min_length=1, max_length=255)
    otr_amount: float = Field(..., gt=0, description="On-the-road price")
    admin_fee: float = Field(..., ge=0)

    @field_validator("asset_name")
    @classmethod
    def validate_asset_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("asset_name cannot be empty or whitespace")
        return v.strip()


class TransactionResponseSchema(BaseModel):
    """Schema for a booked transaction."""

    id: int
    contract_number: str = Field(..., examples=["KTR-20250917-04213"])
    customer_id: int
    tenor_id: int
    asset_name: str
    otr_amount: float
    admin_fee: float
    total_interest: float
    total_installment_amount: float
    status: str = Field(..., examples=["ACTIVE"])
    transaction_date: str

    @classmethod
    def from_dto(cls, dto) -> "TransactionResponseSchema":
        return cls(
            id=dto.id,
            contract_number=dto.contract_number,
            customer_id=dto.customer_id,
            tenor_id=dto.tenor_id,
            asset_name=dto.asset_name,
            otr_amount=float(dto.otr_amount),
            admin_fee=float(dto.admin_fee),
            total_interest=float(dto.total_interest),
            total_installment_amount=float(dto.total_installment_amount),
            status=dto.status,
            transaction_date=dto.transaction_date,
        )


class TransactionPageSchema(BaseModel):
    """Schema for GET /v1/customers/{customer_id}/transactions response."""

    data: list[TransactionResponseSchema]
    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)


class CheckLimitRequestSchema(BaseModel):
    """Schema for POST /v1/partners/check-limit request body."""

    customer_nik: str = Field(..., pattern=NIK_PATTERN)
    tenor_months: int = Field(..., gt=0, le=255)
    transaction_amount: float = Field(..., gt=0)


class CheckLimitResponseSchema(BaseModel):
    """
    Schema for POST /v1/partners/check-limit response.

    The result is a preview; it does not reserve any limit.
    """

    status: str = Field(..., examples=["approved"])
    message: str = Field(..., examples=["Limit is sufficient."])
    remaining_limit: float
