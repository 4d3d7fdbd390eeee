"""Health endpoint — public, outside the screen route guard."""

import pytest

from portal_client import portal_client


@pytest.mark.asyncio
async def test_health_reports_version_and_fixture_counts():
    async with portal_client() as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert data["environment"]
    assert data["fixtures"] == {"products": 3, "service_records": 3}


@pytest.mark.asyncio
async def test_health_needs_no_session():
    async with portal_client() as client:
        response = await client.get("/api/v1/health", follow_redirects=False)

    assert response.status_code == 200
    assert "set-cookie" not in response.headers
