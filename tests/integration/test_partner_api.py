"""
Integration tests for the partner endpoints.

These tests verify:
1. POST /v1/partners/transactions - Booking against the tenor limit
2. POST /v1/partners/check-limit - Non-reserving limit preview
3. Error mapping for unverified customers, unknown tenors and missing limits
"""

import re

import pytest
from httpx import AsyncClient

NIK = "3201010101900001"
CONTRACT_PATTERN = re.compile(r"^KTR-\d{8}-\d{5}$")


# =============================================================================
# POST /v1/partners/transactions Tests
# =============================================================================

class TestCreateTransaction:
    """Tests for POST /v1/partners/transactions endpoint."""

    @pytest.mark.asyncio
    async def test_booked_with_pricing(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        """OTR 40000, fee 1000, tenor 6 -> interest 4800, installment 45800."""
        customer_id = await onboard_customer(limits={6: 50000})

        response = await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(otr_amount=40000, admin_fee=1000),
        )

        assert response.status_code == 201

        data = response.json()
        assert CONTRACT_PATTERN.match(data["contract_number"])
        assert data["customer_id"] == customer_id
        assert data["status"] == "ACTIVE"
        assert data["otr_amount"] == 40000
        assert data["admin_fee"] == 1000
        assert data["total_interest"] == 4800
        assert data["total_installment_amount"] == 45800
        assert data["asset_name"] == "Honda Vario 125"

    @pytest.mark.asyncio
    async def test_within_remaining_limit(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        """Limit 10000, used 2000, requested 5000 -> booked."""
        await onboard_customer(limits={3: 10000})
        await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(tenor_months=3, otr_amount=2000),
        )

        response = await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(tenor_months=3, otr_amount=5000),
        )

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_insufficient_limit(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        """Limit 10000, used 8000, requested 3000 -> rejected."""
        customer_id = await onboard_customer(limits={3: 10000})
        await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(tenor_months=3, otr_amount=8000),
        )

        response = await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(tenor_months=3, otr_amount=3000),
        )

        assert response.status_code == 422
        assert response.json()["error"] == "INSUFFICIENT_LIMIT"

        history = await client.get(f"/v1/customers/{customer_id}/transactions")
        assert history.json()["total"] == 1

    @pytest.mark.asyncio
    async def test_exact_remaining_limit_booked(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        customer_id = await onboard_customer(limits={1: 10000})

        response = await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(tenor_months=1, otr_amount=9500, admin_fee=500),
        )

        assert response.status_code == 201

        limits = (await client.get(f"/v1/customers/{customer_id}/limits")).json()
        assert limits[0]["remaining_limit"] == 0

    @pytest.mark.asyncio
    async def test_limits_are_per_tenor(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        await onboard_customer(limits={1: 10000, 2: 10000})
        await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(tenor_months=1, otr_amount=10000),
        )

        response = await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(tenor_months=2, otr_amount=10000),
        )

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_pending_customer(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        await onboard_customer(status=None)

        response = await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(),
        )

        assert response.status_code == 422
        assert response.json()["error"] == "CUSTOMER_NOT_VERIFIED"

    @pytest.mark.asyncio
    async def test_rejected_customer(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        await onboard_customer(status="REJECTED", limits={6: 50000})

        response = await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(),
        )

        assert response.status_code == 422
        assert response.json()["error"] == "CUSTOMER_NOT_VERIFIED"

    @pytest.mark.asyncio
    async def test_unknown_customer(self, client: AsyncClient, make_transaction_payload):
        response = await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(nik="9999999999999999"),
        )

        assert response.status_code == 404
        assert response.json()["error"] == "CUSTOMER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_unknown_tenor(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        await onboard_customer(limits={6: 50000})

        response = await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(tenor_months=5),
        )

        assert response.status_code == 404
        assert response.json()["error"] == "TENOR_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_limit_not_set(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        customer_id = await onboard_customer(limits={1: 50000})

        response = await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(tenor_months=6),
        )

        assert response.status_code == 404
        assert response.json()["error"] == "LIMIT_NOT_SET"

        history = await client.get(f"/v1/customers/{customer_id}/transactions")
        assert history.json()["total"] == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"otr_amount": 0},
            {"admin_fee": -1},
            {"tenor_months": 0},
            {"asset_name": ""},
            {"nik": "123"},
        ],
    )
    async def test_invalid_payload(
        self,
        client: AsyncClient,
        make_transaction_payload,
        overrides,
    ):
        response = await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(**overrides),
        )

        assert response.status_code == 422


# =============================================================================
# POST /v1/partners/check-limit Tests
# =============================================================================

class TestCheckLimit:
    """Tests for POST /v1/partners/check-limit endpoint."""

    async def _use(self, client: AsyncClient, payload: dict) -> None:
        response = await client.post("/v1/partners/transactions", json=payload)
        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_approved(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        """Limit 10000, used 2000, requested 5000 -> approved, remaining 8000."""
        await onboard_customer(limits={3: 10000})
        await self._use(client, make_transaction_payload(tenor_months=3, otr_amount=2000))

        response = await client.post(
            "/v1/partners/check-limit",
            json={"customer_nik": NIK, "tenor_months": 3, "transaction_amount": 5000},
        )

        assert response.status_code == 200
        assert response.json() == {
            "status": "approved",
            "message": "Limit is sufficient.",
            "remaining_limit": 8000,
        }

    @pytest.mark.asyncio
    async def test_rejected(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        """Limit 10000, used 8000, requested 3000 -> rejected, remaining 2000."""
        await onboard_customer(limits={3: 10000})
        await self._use(client, make_transaction_payload(tenor_months=3, otr_amount=8000))

        response = await client.post(
            "/v1/partners/check-limit",
            json={"customer_nik": NIK, "tenor_months": 3, "transaction_amount": 3000},
        )

        assert response.status_code == 200
        assert response.json() == {
            "status": "rejected",
            "message": "Insufficient limit for this transaction.",
            "remaining_limit": 2000,
        }

    @pytest.mark.asyncio
    async def test_preview_reserves_nothing(
        self,
        client: AsyncClient,
        onboard_customer,
    ):
        customer_id = await onboard_customer(limits={6: 10000})
        body = {"customer_nik": NIK, "tenor_months": 6, "transaction_amount": 7000}

        first = await client.post("/v1/partners/check-limit", json=body)
        second = await client.post("/v1/partners/check-limit", json=body)

        assert first.json() == second.json()
        assert first.json()["remaining_limit"] == 10000

        history = await client.get(f"/v1/customers/{customer_id}/transactions")
        assert history.json()["total"] == 0

    @pytest.mark.asyncio
    async def test_pending_customer(self, client: AsyncClient, onboard_customer):
        await onboard_customer(status=None)

        response = await client.post(
            "/v1/partners/check-limit",
            json={"customer_nik": NIK, "tenor_months": 6, "transaction_amount": 1000},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "CUSTOMER_NOT_VERIFIED"

    @pytest.mark.asyncio
    async def test_limit_not_set(self, client: AsyncClient, onboard_customer):
        await onboard_customer()

        response = await client.post(
            "/v1/partners/check-limit",
            json={"customer_nik": NIK, "tenor_months": 6, "transaction_amount": 1000},
        )

        assert response.status_code == 404
        assert response.json()["error"] == "LIMIT_NOT_SET"
