"""
Integration tests for metrics tracking.

These tests verify:
1. Metrics endpoint returns Prometheus format
2. Business metrics (transactions, limit checks, verifications) are tracked
3. HTTP metrics are recorded per route
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from multifinance.main import app
from multifinance.core.metrics import REGISTRY
from multifinance.infrastructure.database import get_db_session


def sample(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(self, client: AsyncClient):
        response = await client.get("/metrics")

        assert response.status_code == 200
        content_type = response.headers.get("content-type", "")
        assert "text/plain" in content_type or "text/openmetrics" in content_type
        assert "# HELP" in response.text

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "multifinance"
        assert data["database"] == "ok"

    @pytest.mark.asyncio
    async def test_health_degraded_without_database(self, client: AsyncClient):
        async def unreachable_session():
            session = MagicMock()
            session.execute = AsyncMock(
                side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))
            )
            yield session

        app.dependency_overrides[get_db_session] = unreachable_session

        response = await client.get("/health")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "degraded"
        assert data["database"] == "unavailable"


class TestBusinessMetrics:
    """Business counters move with the use cases."""

    @pytest.mark.asyncio
    async def test_transaction_outcomes_counted(
        self,
        client: AsyncClient,
        onboard_customer,
        make_transaction_payload,
    ):
        await onboard_customer(limits={6: 50000})
        created_before = sample("multifinance_transactions_total", {"outcome": "created"})
        rejected_before = sample(
            "multifinance_transactions_total", {"outcome": "insufficient_limit"}
        )
        principal_before = sample(
            "multifinance_transaction_principal_total", {"tenor_months": "6"}
        )

        await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(otr_amount=40000, admin_fee=1000),
        )
        await client.post(
            "/v1/partners/transactions",
            json=make_transaction_payload(otr_amount=40000),
        )

        assert sample("multifinance_transactions_total", {"outcome": "created"}) == created_before + 1
        assert sample(
            "multifinance_transactions_total", {"outcome": "insufficient_limit"}
        ) == rejected_before + 1
        assert sample(
            "multifinance_transaction_principal_total", {"tenor_months": "6"}
        ) == principal_before + 41000

    @pytest.mark.asyncio
    async def test_limit_checks_counted(self, client: AsyncClient, onboard_customer):
        await onboard_customer(limits={6: 50000})
        before = sample("multifinance_limit_checks_total", {"status": "approved"})

        await client.post(
            "/v1/partners/check-limit",
            json={
                "customer_nik": "3201010101900001",
                "tenor_months": 6,
                "transaction_amount": 1000,
            },
        )

        assert sample("multifinance_limit_checks_total", {"status": "approved"}) == before + 1

    @pytest.mark.asyncio
    async def test_verifications_counted(self, client: AsyncClient, onboard_customer):
        before = sample("multifinance_verifications_total", {"status": "REJECTED"})

        await onboard_customer(status="REJECTED")

        assert sample("multifinance_verifications_total", {"status": "REJECTED"}) == before + 1


class TestHttpMetrics:
    """HTTP counters are labelled by route template."""

    @pytest.mark.asyncio
    async def test_request_counted_by_route(self, client: AsyncClient):
        labels = {
            "method": "GET",
            "endpoint": "/v1/admin/customers/{customer_id}",
            "status": "404",
        }
        before = sample("multifinance_http_requests_total", labels)

        await client.get("/v1/admin/customers/12345")

        assert sample("multifinance_http_requests_total", labels) == before + 1
