"""
Unit Tests for the financing rules.

These tests verify:
1. Money rounding
2. Principal, interest and installment calculation
3. Remaining limit and the sufficiency boundary
4. Contract number format
"""

from datetime import datetime
from decimal import Decimal

import pytest

from multifinance.service.financing import (
    FinancingSettings,
    calculate_interest,
    calculate_principal,
    calculate_remaining_limit,
    calculate_total_installment,
    generate_contract_number,
    has_sufficient_limit,
    to_money,
)


# =============================================================================
# Money Tests
# =============================================================================

class TestToMoney:
    """Tests for two-decimal quantization."""

    def test_int_becomes_two_decimals(self):
        assert to_money(40000) == Decimal("40000.00")
        assert str(to_money(40000)) == "40000.00"

    def test_float_goes_through_str(self):
        assert to_money(0.1) == Decimal("0.10")

    def test_rounds_half_up(self):
        assert to_money(Decimal("10.005")) == Decimal("10.01")
        assert to_money(Decimal("10.004")) == Decimal("10.00")


# =============================================================================
# Pricing Tests
# =============================================================================

class TestPricing:
    """Tests for principal, interest and installment."""

    def test_principal_is_otr_plus_fee(self):
        assert calculate_principal(Decimal("40000"), Decimal("1000")) == Decimal("41000.00")

    def test_zero_fee(self):
        assert calculate_principal(Decimal("5000"), Decimal("0")) == Decimal("5000.00")

    def test_interest_example(self):
        """OTR 40000, tenor 6 at 2% per month -> 4800."""
        assert calculate_interest(Decimal("40000"), 6) == Decimal("4800.00")

    def test_interest_ignores_admin_fee(self):
        interest = calculate_interest(Decimal("40000"), 6)
        installment = calculate_total_installment(Decimal("40000"), Decimal("1000"), 6)
        assert installment - calculate_principal(Decimal("40000"), Decimal("1000")) == interest

    def test_total_installment_example(self):
        """OTR 40000, fee 1000, tenor 6 -> 45800."""
        assert calculate_total_installment(
            Decimal("40000"), Decimal("1000"), 6
        ) == Decimal("45800.00")

    @pytest.mark.parametrize(
        "months,expected",
        [
            (1, Decimal("200.00")),
            (3, Decimal("600.00")),
            (12, Decimal("2400.00")),
        ],
    )
    def test_interest_scales_with_tenor(self, months, expected):
        assert calculate_interest(Decimal("10000"), months) == expected

    def test_custom_rate(self):
        custom = FinancingSettings(monthly_interest_rate=Decimal("0.015"))
        assert calculate_interest(Decimal("10000"), 2, custom) == Decimal("300.00")


# =============================================================================
# Limit Tests
# =============================================================================

class TestLimitArithmetic:
    """Tests for remaining limit and sufficiency."""

    def test_remaining(self):
        assert calculate_remaining_limit(Decimal("10000"), Decimal("2000")) == Decimal("8000.00")

    def test_sufficient_when_less(self):
        assert has_sufficient_limit(Decimal("8000"), Decimal("5000")) is True

    def test_sufficient_when_exactly_equal(self):
        """Consuming the remaining limit exactly is allowed."""
        assert has_sufficient_limit(Decimal("5000.00"), Decimal("5000")) is True

    def test_insufficient_when_one_cent_over(self):
        assert has_sufficient_limit(Decimal("2000.00"), Decimal("2000.01")) is False

    def test_zero_remaining(self):
        assert has_sufficient_limit(Decimal("0"), Decimal("0.01")) is False


# =============================================================================
# Contract Number Tests
# =============================================================================

class TestContractNumber:
    """Tests for contract number generation."""

    def test_format(self):
        number = generate_contract_number(
            now=datetime(2025, 9, 17, 10, 30),
            clock_ns=1_726_567_800_000_004_213,
        )
        assert number == "KTR-20250917-04213"

    def test_suffix_zero_padded(self):
        number = generate_contract_number(now=datetime(2025, 1, 2), clock_ns=7)
        assert number == "KTR-20250102-00007"

    def test_suffix_wraps_at_modulus(self):
        number = generate_contract_number(now=datetime(2025, 1, 2), clock_ns=100_000)
        assert number.endswith("-00000")

    def test_custom_prefix_and_width(self):
        custom = FinancingSettings(contract_prefix="ABC", contract_suffix_modulus=1000)
        number = generate_contract_number(
            now=datetime(2024, 12, 31),
            clock_ns=123_456,
            settings=custom,
        )
        assert number == "ABC-20241231-456"

    def test_defaults_to_current_clock(self):
        number = generate_contract_number()
        prefix, day, suffix = number.split("-")
        assert prefix == "KTR"
        assert len(day) == 8 and day.isdigit()
        assert len(suffix) == 5 and suffix.isdigit()


class TestFinancingSettings:
    """Tests for financing settings validation."""

    def test_default_tenors(self):
        assert FinancingSettings().default_tenors == (1, 2, 3, 6, 12)

    def test_tenors_sorted(self):
        assert FinancingSettings(default_tenors=(12, 1, 6)).default_tenors == (1, 6, 12)

    def test_rejects_duplicate_tenors(self):
        with pytest.raises(ValueError):
            FinancingSettings(default_tenors=(1, 1))

    def test_rejects_non_positive_tenors(self):
        with pytest.raises(ValueError):
            FinancingSettings(default_tenors=(0, 3))
