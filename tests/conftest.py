"""Shared fixtures for the forge mock test suite."""

import pytest
from fastapi.testclient import TestClient

from forge_mock.core.config import Settings
from forge_mock.main import create_app


@pytest.fixture
def settings():
    """Fresh settings built from defaults and the test environment"""
    return Settings()


@pytest.fixture
def app(settings):
    """Application with empty stores"""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Synchronous HTTP client bound to the in-process app"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_gateway(client):
    """Factory creating a gateway through the API and returning its JSON"""
    def _create(**overrides):
        body = {
            "name": "public-gateway",
            "url": "https://api.example.com",
            "description": "A public gateway with no authentication",
            "authType": "none",
            "tags": ["public", "example"],
        }
        body.update(overrides)
        response = client.post("/gateways", json=body)
        assert response.status_code == 200, response.text
        return response.json()
    return _create


@pytest.fixture
def create_server(client):
    """Factory creating a server through the wrapped envelope and returning its JSON"""
    def _create(envelope_extra=None, **overrides):
        server = {
            "name": "example-mcp-server",
            "description": "An example MCP server for demonstration",
            "icon": "server",
            "tags": ["mcp", "example"],
        }
        server.update(overrides)
        body = {"server": server, **(envelope_extra or {})}
        response = client.post("/servers", json=body)
        assert response.status_code == 200, response.text
        return response.json()
    return _create
