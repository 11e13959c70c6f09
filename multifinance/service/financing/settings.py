"""
Financing Settings for the Multifinance credit engine.

This module contains the configurable parameters used to price a
transaction and to number its contract.

Environment variables use the FINANCING_ prefix:
    FINANCING_MONTHLY_INTEREST_RATE=0.02
    FINANCING_CONTRACT_PREFIX=KTR

Usage:
    from multifinance.service.financing.settings import financing_settings

    rate = financing_settings.monthly_interest_rate

    # Or create custom settings for testing
    custom = FinancingSettings(monthly_interest_rate=Decimal("0.015"))
"""

from decimal import Decimal
from functools import lru_cache
from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FinancingSettings(BaseSettings):
    """
    Configurable parameters for transaction pricing.

    All settings can be overridden via environment variables with FINANCING_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="FINANCING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    monthly_interest_rate: Decimal = Field(
        default=Decimal("0.02"),
        ge=0,
        description="Flat interest charged per tenor month, as a fraction of OTR",
    )
    contract_prefix: str = Field(
        default="KTR",
        min_length=1,
        description="Prefix of generated contract numbers",
    )
    contract_suffix_modulus: int = Field(
        default=100_000,
        gt=1,
        description="Modulus applied to the nanosecond clock for the contract suffix",
    )
    default_tenors: Tuple[int, ...] = Field(
        default=(1, 2, 3, 6, 12),
        description="Tenor durations (months) seeded at startup",
    )

    @field_validator("default_tenors")
    @classmethod
    def validate_tenors(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Tenors must be positive and unique."""
        if any(months <= 0 for months in v):
            raise ValueError("tenor durations must be positive")
        if len(set(v)) != len(v):
            raise ValueError("tenor durations must be unique")
        return tuple(sorted(v))

    @property
    def suffix_width(self) -> int:
        return len(str(self.contract_suffix_modulus - 1))


@lru_cache
def get_financing_settings() -> FinancingSettings:
    """Get cached financing settings instance."""
    return FinancingSettings()


financing_settings = get_financing_settings()
