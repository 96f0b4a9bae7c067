"""Integration tests for POST /auth/credentials."""

import pytest


@pytest.mark.asyncio
async def test_valid_credentials_return_db_login(client):
    response = await client.post(
        "/auth/credentials", json={"clientId": "branch-01", "accessToken": "tok-01"}
    )

    assert response.status_code == 200
    assert response.json() == {"dbUser": "relay_branch01", "dbPassword": "s3cret"}


@pytest.mark.asyncio
async def test_response_never_contains_token_or_server_details(client):
    response = await client.post(
        "/auth/credentials", json={"clientId": "branch-01", "accessToken": "tok-01"}
    )
    body = response.text
    assert "tok-01" not in body
    for key in ("host", "port", "database", "accessToken"):
        assert key not in response.json()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"clientId": "branch-01", "accessToken": "wrong"},
        {"clientId": "nobody", "accessToken": "tok-01"},
        {"clientId": "branch-01", "accessToken": "tok-02"},
    ],
)
async def test_invalid_credentials_are_401(client, payload):
    response = await client.post("/auth/credentials", json=payload)

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid client ID or access token"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"clientId": "branch-01"},
        {"accessToken": "tok-01"},
        {"clientId": "", "accessToken": "tok-01"},
    ],
)
async def test_missing_fields_are_400_without_store_access(client, gateway, payload):
    response = await client.post("/auth/credentials", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing clientId or accessToken"}
    assert gateway.connections == 0


@pytest.mark.asyncio
async def test_wrong_json_type_is_400(client, gateway):
    response = await client.post(
        "/auth/credentials", json={"clientId": ["branch-01"], "accessToken": "tok-01"}
    )

    assert response.status_code == 400
    assert "error" in response.json()
    assert gateway.connections == 0
