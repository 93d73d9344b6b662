"""
In-memory resource store for the mock service.

One store holds every entity of a single resource kind, keyed by a
store-assigned identifier of the form ``"<kind>-<n>"``. Identifiers come from
a monotonic counter and are never reused, so a deleted identifier stays
unresolvable for the lifetime of the store.

Entities are pydantic models. The store hands out copies so callers cannot
mutate stored state except through the store's own methods.
"""

import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from .exceptions import ResourceNotFoundError

EntityT = TypeVar("EntityT", bound=BaseModel)

# Fields owned by the store; never taken from caller input
RESERVED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResourceStore(Generic[EntityT]):
    """
    Thread-safe keyed store for one resource kind.

    Example:
        store = ResourceStore("gateway", Gateway, active_field="enabled")
        gateway = store.create({"name": "public", "url": "https://api.example.com"})
        store.set_active(gateway.id, False)
        store.delete(gateway.id)
    """

    def __init__(
        self,
        kind: str,
        entity_model: Type[EntityT],
        active_field: str = "enabled",
        display_name: Optional[str] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.kind = kind
        self.entity_model = entity_model
        self.active_field = active_field
        self.display_name = display_name or kind.capitalize()
        self._clock = clock
        self._entities: Dict[str, EntityT] = {}
        self._counter = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)

    def __contains__(self, resource_id: object) -> bool:
        with self._lock:
            return resource_id in self._entities

    def create(self, fields: Mapping[str, Any]) -> EntityT:
        """
        Store a new entity built from caller fields.

        The identifier and both timestamps are assigned here and the active
        flag is forced on, whatever the caller supplied.

        Raises:
            pydantic.ValidationError: If the fields do not form a valid entity
        """
        data = {k: v for k, v in fields.items() if k not in RESERVED_FIELDS}
        with self._lock:
            now = self._clock()
            resource_id = f"{self.kind}-{self._counter + 1}"
            data.update({
                "id": resource_id,
                "created_at": now,
                "updated_at": now,
                self.active_field: True,
            })
            entity = self.entity_model.model_validate(data)
            self._counter += 1
            self._entities[resource_id] = entity
            return entity.model_copy(deep=True)

    def get(self, resource_id: str) -> EntityT:
        with self._lock:
            return self._require(resource_id).model_copy(deep=True)

    def list(self, predicate: Optional[Callable[[EntityT], bool]] = None) -> List[EntityT]:
        """Return copies of all entities, optionally filtered. Order is unspecified."""
        with self._lock:
            entities = list(self._entities.values())
        return [e.model_copy(deep=True) for e in entities if predicate is None or predicate(e)]

    def update(self, resource_id: str, changes: Mapping[str, Any]) -> EntityT:
        """
        Overwrite the given fields and refresh ``updated_at``.

        Fields not present in ``changes`` keep their stored values. Store-owned
        fields and the active flag are ignored; use set_active() for the latter.
        """
        ignored = RESERVED_FIELDS | {self.active_field}
        allowed = {k: v for k, v in changes.items() if k not in ignored}
        with self._lock:
            return self._write(resource_id, allowed)

    def set_active(self, resource_id: str, active: bool) -> EntityT:
        """Set the active flag to an explicit value and refresh ``updated_at``."""
        with self._lock:
            return self._write(resource_id, {self.active_field: active})

    def delete(self, resource_id: str) -> None:
        with self._lock:
            self._require(resource_id)
            del self._entities[resource_id]

    def clear(self) -> None:
        """Drop all entities. The identifier counter keeps counting."""
        with self._lock:
            self._entities.clear()

    def _require(self, resource_id: str) -> EntityT:
        entity = self._entities.get(resource_id)
        if entity is None:
            raise ResourceNotFoundError(self.kind, resource_id, self.display_name)
        return entity

    def _write(self, resource_id: str, changes: Dict[str, Any]) -> EntityT:
        current = self._require(resource_id)
        updated = current.model_copy(
            update={**changes, "updated_at": self._next_timestamp(current.updated_at)},
            deep=True,
        )
        self._entities[resource_id] = updated
        return updated.model_copy(deep=True)

    def _next_timestamp(self, previous: Optional[datetime]) -> datetime:
        # updated_at strictly increases on every write
        now = self._clock()
        if previous is not None and now <= previous:
            now = previous + timedelta(microseconds=1)
        return now
