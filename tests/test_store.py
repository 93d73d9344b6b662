"""
Unit tests for ResourceStore.

Covers identifier assignment, partial updates, explicit activation and
deletion semantics of the in-memory keyed store.
"""

from datetime import datetime, timezone

import pytest

from forge_mock.core.exceptions import ResourceNotFoundError
from forge_mock.core.store import ResourceStore
from forge_mock.models import Gateway, Server, Tag

FROZEN = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def gateway_store():
    return ResourceStore("gateway", Gateway, active_field="enabled")


@pytest.fixture
def frozen_server_store():
    return ResourceStore("server", Server, active_field="is_active", clock=lambda: FROZEN)


class TestResourceStore:
    """Test cases for ResourceStore."""

    def test_create_assigns_identifier_and_timestamps(self, gateway_store):
        gateway = gateway_store.create({"name": "gw", "url": "https://a.example.com"})

        assert gateway.id == "gateway-1"
        assert gateway.enabled is True
        assert gateway.created_at == gateway.updated_at

    def test_create_ignores_caller_owned_fields(self, gateway_store):
        gateway = gateway_store.create({
            "id": "caller-id",
            "name": "gw",
            "url": "https://a.example.com",
            "enabled": False,
            "created_at": FROZEN,
        })

        assert gateway.id == "gateway-1"
        assert gateway.enabled is True
        assert gateway.created_at != FROZEN

    def test_identifiers_are_never_reused(self, gateway_store):
        first = gateway_store.create({"name": "a", "url": "https://a.example.com"})
        gateway_store.delete(first.id)
        second = gateway_store.create({"name": "b", "url": "https://b.example.com"})

        assert second.id == "gateway-2"
        assert first.id not in gateway_store

    def test_get_missing_raises_not_found(self, gateway_store):
        with pytest.raises(ResourceNotFoundError) as exc_info:
            gateway_store.get("gateway-404")

        assert exc_info.value.message == "Gateway not found"
        assert exc_info.value.resource_id == "gateway-404"

    def test_returned_entities_are_copies(self, gateway_store):
        gateway = gateway_store.create({"name": "gw", "url": "https://a.example.com", "tags": ["x"]})
        gateway.name = "mutated"
        gateway.tags.append(Tag(id="y", label="y"))

        stored = gateway_store.get(gateway.id)
        assert stored.name == "gw"
        assert [tag.id for tag in stored.tags] == ["x"]

    def test_update_overwrites_only_given_fields(self, gateway_store):
        gateway = gateway_store.create({
            "name": "gw",
            "url": "https://a.example.com",
            "description": "before",
            "tags": ["keep"],
        })

        updated = gateway_store.update(gateway.id, {"description": "after"})

        assert updated.description == "after"
        assert updated.name == "gw"
        assert [tag.id for tag in updated.tags] == ["keep"]
        assert updated.updated_at > gateway.updated_at

    def test_update_cannot_touch_reserved_fields(self, gateway_store):
        gateway = gateway_store.create({"name": "gw", "url": "https://a.example.com"})

        updated = gateway_store.update(gateway.id, {"id": "other", "enabled": False})

        assert updated.id == gateway.id
        assert updated.enabled is True

    def test_set_active_is_explicit(self, gateway_store):
        gateway = gateway_store.create({"name": "gw", "url": "https://a.example.com"})

        assert gateway_store.set_active(gateway.id, False).enabled is False
        assert gateway_store.set_active(gateway.id, False).enabled is False
        assert gateway_store.set_active(gateway.id, True).enabled is True

    def test_timestamps_strictly_increase_with_frozen_clock(self, frozen_server_store):
        server = frozen_server_store.create({"name": "srv"})
        first = frozen_server_store.set_active(server.id, False)
        second = frozen_server_store.set_active(server.id, True)

        assert server.created_at == FROZEN
        assert server.created_at < first.updated_at < second.updated_at
        assert second.created_at == FROZEN

    def test_list_with_predicate(self, frozen_server_store):
        frozen_server_store.create({"name": "a"})
        b = frozen_server_store.create({"name": "b"})
        frozen_server_store.set_active(b.id, False)

        assert len(frozen_server_store.list()) == 2
        active = frozen_server_store.list(lambda s: s.is_active)
        assert [s.name for s in active] == ["a"]

    def test_delete_missing_raises_not_found(self, frozen_server_store):
        with pytest.raises(ResourceNotFoundError, match="Server not found"):
            frozen_server_store.delete("server-1")

    def test_clear_keeps_counter(self, gateway_store):
        gateway_store.create({"name": "a", "url": "https://a.example.com"})
        gateway_store.clear()

        assert len(gateway_store) == 0
        assert gateway_store.create({"name": "b", "url": "https://b.example.com"}).id == "gateway-2"
