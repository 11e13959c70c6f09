"""Limit-related Pydantic schemas."""

from pydantic import BaseModel, Field, field_validator


class LimitItemSchema(BaseModel):
    """One tenor limit within a set-limits request."""

    tenor_months: int = Field(..., gt=0, examples=[6])
    limit_amount: float = Field(
        ...,
        description="Limit amount, must not be negative",
        examples=[5000000],
    )


class SetLimitsRequestSchema(BaseModel):
    """Schema for POST /v1/admin/customers/{customer_id}/limits request body."""

    limits: list[LimitItemSchema] = Field(..., min_length=1)

    @field_validator("limits")
    @classmethod
    def validate_unique_tenors(cls, v: list[LimitItemSchema]) -> list[LimitItemSchema]:
        months = [item.tenor_months for item in v]
        if len(set(months)) != len(months):
            raise ValueError("tenor_months must not repeat")
        return v


class SetLimitsResponseSchema(BaseModel):
    message: str = "Customer limits updated"
    updated: int = Field(..., ge=0)


class LimitDetailSchema(BaseModel):
    """Limit, usage and remaining amount for one tenor."""

    tenor_months: int
    limit_amount: float
    used_amount: float
    remaining_limit: float

    @classmethod
    def from_dto(cls, dto) -> "LimitDetailSchema":
        return cls(
            tenor_months=dto.tenor_months,
            limit_amount=float(dto.limit_amount),
            used_amount=float(dto.used_amount),
            remaining_limit=float(dto.remaining_limit),
        )
