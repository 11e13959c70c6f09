"""
Financing rules for the Multifinance credit engine
"""

from .settings import FinancingSettings, financing_settings
from .pricing import (
    to_money,
    calculate_principal,
    calculate_interest,
    calculate_total_installment,
    calculate_remaining_limit,
    has_sufficient_limit,
)
from .contract import generate_contract_number

__all__ = [
    # Settings
    "FinancingSettings",
    "financing_settings",
    # Pricing
    "to_money",
    "calculate_principal",
    "calculate_interest",
    "calculate_total_installment",
    "calculate_remaining_limit",
    "has_sufficient_limit",
    # Contract
    "generate_contract_number",
]
