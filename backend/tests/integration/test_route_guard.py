"""Route guard and not-found behaviour."""

import pytest

from portal_client import login, portal_client

PROTECTED_GETS = [
    "/dashboard",
    "/product/1",
    "/register-warranty",
    "/service-request",
    "/service-history",
    "/profile",
]


@pytest.mark.asyncio
@pytest.mark.parametrize("path", PROTECTED_GETS)
async def test_unauthenticated_get_redirects_to_login(path: str):
    async with portal_client() as client:
        response = await client.get(path)

    assert response.status_code == 303
    assert response.headers["location"] == "/login"


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/register-warranty", "/profile", "/logout", "/product/1/customer-phone"])
async def test_unauthenticated_post_redirects_to_login(path: str):
    async with portal_client() as client:
        response = await client.post(path, json={})

    assert response.status_code == 303
    assert response.headers["location"] == "/login"


@pytest.mark.asyncio
async def test_role_selection_alone_does_not_unlock_dashboard():
    async with portal_client() as client:
        await client.post("/", json={"role": "distributor"})
        response = await client.get("/dashboard")

    assert response.status_code == 303


@pytest.mark.asyncio
@pytest.mark.parametrize("path", PROTECTED_GETS)
async def test_authenticated_session_reaches_protected_screens(path: str):
    async with portal_client() as client:
        await login(client)
        response = await client.get(path)

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_public_screens_need_no_login():
    async with portal_client() as client:
        assert (await client.get("/")).status_code == 200
        assert (await client.get("/login")).status_code == 200


@pytest.mark.asyncio
async def test_unknown_path_renders_not_found():
    async with portal_client() as client:
        response = await client.get("/no/such/screen")

    assert response.status_code == 404
    data = response.json()
    assert data["screen"] == "not-found"
    assert data["path"] == "/no/such/screen"
    assert data["message"] == "Oops! Page not found"
    assert data["home"] == "/"


@pytest.mark.asyncio
async def test_unknown_product_renders_not_found():
    async with portal_client() as client:
        await login(client)
        response = await client.get("/product/999")

    assert response.status_code == 404
    assert response.json()["screen"] == "not-found"


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/register-warranty", "/profile", "/product/1/customer-phone"])
async def test_unauthenticated_post_with_malformed_body_still_redirects(path: str):
    async with portal_client() as client:
        response = await client.post(
            path,
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

    assert response.status_code == 303
    assert response.headers["location"] == "/login"


@pytest.mark.asyncio
async def test_authenticated_post_with_malformed_body_is_a_form_error():
    async with portal_client() as client:
        await login(client)
        response = await client.post(
            "/register-warranty",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

    assert response.status_code == 422
    data = response.json()
    assert data["screen"] == "register-warranty"
    assert data["notification"]["variant"] == "destructive"
    assert data["navigate_to"] is None
    assert "body" in data["field_errors"]
