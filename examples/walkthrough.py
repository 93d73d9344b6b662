"""
Forge Mock Walkthrough

Drives the in-process mock through the gateway and server flows an SDK
would perform: authenticate, create with each gateway auth type, list,
update, toggle, browse server associations, handle a 404 and clean up.

Run: python examples/walkthrough.py
"""

import asyncio
import logging

import httpx

from forge_mock.main import create_app

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("walkthrough")

GATEWAYS = [
    {"name": "public-gateway", "url": "https://api.example.com", "authType": "none",
     "tags": ["public", "example"], "team_id": "team-example", "visibility": "public"},
    {"name": "basic-auth-gateway", "url": "https://api.private.example.com", "authType": "basic",
     "authUsername": "admin", "authPassword": "secret123", "tags": ["basic-auth", "private"]},
    {"name": "bearer-auth-gateway", "url": "https://api.secure.example.com", "authType": "bearer",
     "authToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...", "tags": ["bearer-auth", "jwt"]},
    {"name": "apikey-gateway", "url": "https://api.partner.example.com", "authType": "api_key",
     "authHeaders": [{"X-API-Key": "abc123def456"}, {"X-Client-ID": "client-12345"}],
     "tags": ["api-key", "partner"]},
    {"name": "oauth-gateway", "url": "https://api.oauth.example.com", "authType": "oauth",
     "oauthConfig": {"client_id": "oauth-client-123", "token_url": "https://auth.example.com/oauth/token",
                     "scope": "read write"},
     "tags": ["oauth", "oauth2"]},
]


async def demo_gateways(client: httpx.AsyncClient) -> None:
    """Gateways: unwrapped bodies, nested toggle responses."""
    logger.info("=== Demo: Gateways ===")

    created = []
    for body in GATEWAYS:
        response = await client.post("/gateways", json=body)
        response.raise_for_status()
        gateway = response.json()
        created.append(gateway)
        logger.info(
            f"Created {gateway['name']} ({gateway['id']}) auth={gateway['authType']} "
            f"rate limit {response.headers['X-RateLimit-Remaining']}/{response.headers['X-RateLimit-Limit']}"
        )

    listed = (await client.get("/gateways", params={"include_inactive": "true", "limit": 10})).json()
    logger.info(f"Listed {len(listed)} gateway(s)")

    first_id = created[0]["id"]
    updated = (await client.put(f"/gateways/{first_id}", json={
        "description": "An updated public gateway with enhanced features",
        "tags": ["public", "example", "updated"],
    })).json()
    logger.info(f"Updated tags: {updated['tags']}")

    for activate in ("false", "true"):
        toggled = (await client.post(f"/gateways/{first_id}/toggle", params={"activate": activate})).json()
        logger.info(f"{toggled['message']}: enabled={toggled['gateway']['enabled']}")

    missing = await client.get("/gateways/non-existent-gateway-id")
    logger.info(f"Expected error: HTTP {missing.status_code} - {missing.json()['message']}")

    for gateway in created:
        (await client.delete(f"/gateways/{gateway['id']}")).raise_for_status()
    logger.info(f"Deleted {len(created)} gateway(s)")


async def demo_servers(client: httpx.AsyncClient) -> None:
    """Servers: wrapped create, flat toggle responses, association listings."""
    logger.info("=== Demo: Servers ===")

    response = await client.post("/servers", json={
        "server": {
            "name": "example-mcp-server",
            "description": "An example MCP server for demonstration",
            "icon": "server",
            "tags": ["mcp", "example"],
        },
        "team_id": "team-example",
        "visibility": "public",
    })
    response.raise_for_status()
    server = response.json()
    server_id = server["id"]
    logger.info(f"Created {server['name']} ({server_id}) active={server['isActive']}")

    listed = (await client.get("/servers", params={
        "include_inactive": "true",
        "tags": "mcp,example",
        "team_id": "team-example",
        "visibility": "public",
    })).json()
    logger.info(f"Listed {len(listed)} server(s)")

    updated = (await client.put(f"/servers/{server_id}", json={
        "description": "An advanced MCP server with enhanced features",
        "icon": "server-enhanced",
    })).json()
    logger.info(f"Updated icon: {updated['icon']}")

    for activate in ("false", "true"):
        toggled = (await client.post(f"/servers/{server_id}/toggle", params={"activate": activate})).json()
        logger.info(f"Server is now active: {toggled['isActive']}")

    for association in ("tools", "resources", "prompts"):
        items = (await client.get(f"/servers/{server_id}/{association}")).json()
        logger.info(f"Server provides {len(items)} {association}: {[item['name'] for item in items]}")

    missing = await client.get("/servers/non-existent-server-id")
    logger.info(f"Expected error: HTTP {missing.status_code} - {missing.json()['message']}")

    (await client.delete(f"/servers/{server_id}")).raise_for_status()
    logger.info("Server deleted")


async def main():
    """Run both walkthroughs against a fresh in-process app."""
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://forge-mock") as client:
        login = await client.post("/auth/login", json={"email": "admin@example.com", "password": "secret"})
        token = login.json()["access_token"]
        client.headers["Authorization"] = f"Bearer {token}"
        logger.info(f"Obtained token: {token[:20]}...")

        await demo_gateways(client)
        await demo_servers(client)

    logger.info("=== Walkthrough completed ===")


if __name__ == "__main__":
    asyncio.run(main())
