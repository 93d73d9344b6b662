"""
End-to-end flows driven through an async httpx client.

These mirror how an SDK talks to the mock: log in, then run the gateway and
server lifecycles with the bearer token attached.
"""

import httpx
import pytest
import pytest_asyncio

from forge_mock.main import create_app


@pytest_asyncio.fixture
async def async_client():
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        login = await client.post("/auth/login", json={"email": "admin@example.com", "password": "secret"})
        client.headers["Authorization"] = f"Bearer {login.json()['access_token']}"
        yield client


class TestLifecycles:
    """Full create → update → toggle → delete flows."""

    @pytest.mark.asyncio
    async def test_gateway_lifecycle(self, async_client):
        created = await async_client.post("/gateways", json={
            "name": "oauth-gateway",
            "url": "https://api.oauth.example.com",
            "authType": "oauth",
            "oauthConfig": {"client_id": "oauth-client-123"},
            "tags": ["oauth"],
        })
        assert created.status_code == 200
        gateway_id = created.json()["id"]

        updated = await async_client.put(f"/gateways/{gateway_id}", json={"description": "updated"})
        assert updated.json()["oauthConfig"] == {"client_id": "oauth-client-123"}

        toggled = await async_client.post(f"/gateways/{gateway_id}/toggle", params={"activate": "false"})
        assert toggled.json()["gateway"]["enabled"] is False

        listed = await async_client.get("/gateways")
        assert listed.json() == []

        deleted = await async_client.delete(f"/gateways/{gateway_id}")
        assert deleted.status_code == 204

        missing = await async_client.get(f"/gateways/{gateway_id}")
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_server_lifecycle(self, async_client):
        created = await async_client.post("/servers", json={
            "server": {"name": "example-mcp-server", "tags": ["mcp"]},
            "team_id": "team-example",
            "visibility": "public",
        })
        assert created.status_code == 200
        assert created.headers["X-RateLimit-Remaining"] == "995"
        server_id = created.json()["id"]

        tools = await async_client.get(f"/servers/{server_id}/tools")
        assert [tool["name"] for tool in tools.json()] == ["read_file", "write_file", "list_directory"]

        toggled = await async_client.post(f"/servers/{server_id}/toggle?activate=false")
        assert toggled.json()["isActive"] is False

        listed = await async_client.get(
            "/servers",
            params={"include_inactive": "true", "team_id": "team-example", "visibility": "public"}
        )
        assert [s["id"] for s in listed.json()] == [server_id]

        deleted = await async_client.delete(f"/servers/{server_id}")
        assert deleted.status_code == 204
        prompts = await async_client.get(f"/servers/{server_id}/prompts")
        assert prompts.status_code == 404
