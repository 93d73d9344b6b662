"""
Per-kind response policies.

Gateways and servers share one set of handlers. Everything that differs
between the two kinds (request envelopes, toggle response shape, the name of
the active flag, list filters, association routes) is declared here, so a new
resource kind only needs a new ResourcePolicy.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Type

from pydantic import BaseModel, ValidationError

from forge_mock.models import (
    ApiModel,
    Gateway,
    GatewayCreate,
    GatewayUpdate,
    Server,
    ServerCreate,
    ServerUpdate,
    SERVER_ASSOCIATIONS,
)
from .exceptions import MalformedRequestError

logger = logging.getLogger(__name__)


def parse_flag(value: Optional[str]) -> bool:
    """Query flags are true only for the exact literal ``true``."""
    return value == "true"


def parse_csv(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return ()
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class ResourcePolicy:
    """Declarative description of one resource kind's REST conventions."""

    kind: str
    collection: str
    display_name: str
    entity_model: Type[ApiModel]
    create_model: Type[ApiModel]
    update_model: Type[ApiModel]
    active_field: str
    # Key wrapping the create body, e.g. {"server": {...}}; None means unwrapped
    create_envelope: Optional[str] = None
    # Envelope-level fields used when the wrapped body leaves them unset
    envelope_fields: Tuple[str, ...] = ()
    # Key nesting the entity in a status/message toggle envelope; None means flat
    toggle_envelope: Optional[str] = None
    # Query parameters matched exactly against the same-named entity field when it is set
    exact_filters: Tuple[str, ...] = ()
    associations: Mapping[str, Sequence[ApiModel]] = field(default_factory=dict)

    @property
    def path(self) -> str:
        return f"/{self.collection}"

    def decode_create(self, body: Any) -> Dict[str, Any]:
        """
        Turn a decoded create body into entity fields.

        Raises:
            MalformedRequestError: If the envelope is missing or the body fails validation
        """
        if self.create_envelope is None:
            return self._validate(self.create_model, body)

        if not isinstance(body, dict) or not isinstance(body.get(self.create_envelope), dict):
            raise MalformedRequestError(
                f"request body must wrap the {self.kind} in a '{self.create_envelope}' field"
            )

        fields = self._validate(self.create_model, body[self.create_envelope])
        inherited = {
            name: body[name]
            for name in self.envelope_fields
            if fields.get(name) is None and body.get(name) is not None
        }
        if inherited:
            fields = self._validate(self.create_model, {**fields, **inherited})
        return fields

    def decode_update(self, body: Any) -> Dict[str, Any]:
        """Return only the fields present with a non-null value."""
        payload = self._model(self.update_model, body)
        return {
            name: getattr(payload, name)
            for name in payload.model_fields_set
            if getattr(payload, name) is not None
        }

    def shape_toggle(self, entity: ApiModel) -> Dict[str, Any]:
        """Render a toggle response: nested envelope or the entity itself."""
        if self.toggle_envelope is None:
            return entity.to_json()
        return {
            "status": "success",
            "message": f"{self.display_name} toggled successfully",
            self.toggle_envelope: entity.to_json(),
        }

    def matches(self, entity: BaseModel, params: Mapping[str, str]) -> bool:
        """Apply list query filters to one entity."""
        if not parse_flag(params.get("include_inactive")) and not getattr(entity, self.active_field):
            return False

        for name in self.exact_filters:
            expected = params.get(name)
            value = getattr(entity, name, None)
            # Entities without the field are not scoped and always pass
            if expected and value is not None and value != expected:
                return False

        wanted = parse_csv(params.get("tags"))
        if wanted:
            carried = {tag.id for tag in getattr(entity, "tags", None) or []}
            if not carried.intersection(wanted):
                return False

        return True

    def _validate(self, model: Type[ApiModel], body: Any) -> Dict[str, Any]:
        return self._model(model, body).model_dump(exclude_none=True)

    def _model(self, model: Type[ApiModel], body: Any) -> ApiModel:
        try:
            return model.model_validate(body)
        except ValidationError as e:
            logger.warning(
                "Request body failed validation",
                extra={"kind": self.kind, "model": model.__name__, "errors": e.error_count()}
            )
            raise MalformedRequestError(str(e))


GATEWAY_POLICY = ResourcePolicy(
    kind="gateway",
    collection="gateways",
    display_name="Gateway",
    entity_model=Gateway,
    create_model=GatewayCreate,
    update_model=GatewayUpdate,
    active_field="enabled",
    toggle_envelope="gateway",
)

SERVER_POLICY = ResourcePolicy(
    kind="server",
    collection="servers",
    display_name="Server",
    entity_model=Server,
    create_model=ServerCreate,
    update_model=ServerUpdate,
    active_field="is_active",
    create_envelope="server",
    envelope_fields=("team_id", "visibility"),
    exact_filters=("team_id", "visibility"),
    associations=SERVER_ASSOCIATIONS,
)

POLICIES: Tuple[ResourcePolicy, ...] = (GATEWAY_POLICY, SERVER_POLICY)
