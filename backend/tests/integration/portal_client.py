"""Shared helpers for HTTP-level tests of the portal screens."""

from httpx import ASGITransport, AsyncClient

from warranty_portal.main import app


def portal_client() -> AsyncClient:
    """Client that keeps the session cookie between requests, like a browser tab."""
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")


async def login(client: AsyncClient, role: str = "customer", mobile: str = "9876543210") -> None:
    response = await client.post("/", json={"role": role})
    assert response.status_code == 200
    response = await client.post("/login/send-otp", json={"mobile": mobile})
    assert response.status_code == 200
    response = await client.post("/login/verify-otp", json={"otp": "123456"})
    assert response.status_code == 200
