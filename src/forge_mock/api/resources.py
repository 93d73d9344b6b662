"""
Resource API Routes

Builds the CRUD, toggle and association routes for one resource kind from
its ResourcePolicy. Every kind is served by the same handlers.
"""

import json
import logging
from typing import Any, Callable

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from forge_mock.core.exceptions import MalformedRequestError
from forge_mock.core.policy import ResourcePolicy, parse_flag
from forge_mock.core.store import ResourceStore

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant: {name}")


async def read_json_body(request: Request) -> Any:
    """
    Decode the request body as JSON.

    Raises:
        MalformedRequestError: If the body is empty or not valid JSON
    """
    raw = await request.body()
    if not raw.strip():
        raise MalformedRequestError("request body is empty")
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedRequestError(str(e))


def store_dependency(policy: ResourcePolicy) -> Callable[[Request], ResourceStore]:
    """Dependency resolving the app-scoped store for one kind."""

    def get_store(request: Request) -> ResourceStore:
        return request.app.state.stores[policy.kind]

    get_store.__name__ = f"get_{policy.kind}_store"
    return get_store


def build_resource_router(policy: ResourcePolicy) -> APIRouter:
    """Create the router serving ``/<collection>`` for the given policy."""
    router = APIRouter(prefix=policy.path, tags=[policy.collection])
    get_store = store_dependency(policy)

    @router.post("", summary=f"Create {policy.display_name}")
    async def create_resource(request: Request, store: ResourceStore = Depends(get_store)):
        fields = policy.decode_create(await read_json_body(request))
        entity = store.create(fields)

        logger.info(
            f"Created {policy.kind}",
            extra={"kind": policy.kind, "resource_id": entity.id, "resource_name": entity.name}
        )
        return JSONResponse(content=entity.to_json())

    @router.get("", summary=f"List {policy.display_name}s")
    async def list_resources(request: Request, store: ResourceStore = Depends(get_store)):
        params = request.query_params
        entities = store.list(lambda entity: policy.matches(entity, params))

        logger.debug(
            f"Listed {len(entities)} {policy.collection}",
            extra={"kind": policy.kind, "count": len(entities), "params": dict(params)}
        )
        return JSONResponse(content=[entity.to_json() for entity in entities])

    @router.get("/{resource_id}", summary=f"Get {policy.display_name}")
    async def get_resource(resource_id: str, store: ResourceStore = Depends(get_store)):
        return JSONResponse(content=store.get(resource_id).to_json())

    @router.put("/{resource_id}", summary=f"Update {policy.display_name}")
    async def update_resource(
        resource_id: str,
        request: Request,
        store: ResourceStore = Depends(get_store)
    ):
        # Unknown ids are reported before the body is looked at
        store.get(resource_id)
        changes = policy.decode_update(await read_json_body(request))
        entity = store.update(resource_id, changes)

        logger.info(
            f"Updated {policy.kind}",
            extra={"kind": policy.kind, "resource_id": resource_id, "fields": sorted(changes)}
        )
        return JSONResponse(content=entity.to_json())

    @router.delete("/{resource_id}", summary=f"Delete {policy.display_name}")
    async def delete_resource(resource_id: str, store: ResourceStore = Depends(get_store)):
        store.delete(resource_id)

        logger.info(f"Deleted {policy.kind}", extra={"kind": policy.kind, "resource_id": resource_id})
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.post("/{resource_id}/toggle", summary=f"Toggle {policy.display_name}")
    async def toggle_resource(
        resource_id: str,
        request: Request,
        store: ResourceStore = Depends(get_store)
    ):
        activate = parse_flag(request.query_params.get("activate"))
        entity = store.set_active(resource_id, activate)

        logger.info(
            f"Toggled {policy.kind}",
            extra={"kind": policy.kind, "resource_id": resource_id, "active": activate}
        )
        return JSONResponse(content=policy.shape_toggle(entity))

    for name, items in policy.associations.items():
        _add_association_route(router, policy, get_store, name, items)

    return router


def _add_association_route(router: APIRouter, policy: ResourcePolicy, get_store, name: str, items) -> None:
    payload = [item.to_json() for item in items]

    async def list_association(resource_id: str, store: ResourceStore = Depends(get_store)):
        store.get(resource_id)
        return JSONResponse(content=payload)

    router.add_api_route(
        f"/{{resource_id}}/{name}",
        list_association,
        methods=["GET"],
        summary=f"List {policy.display_name} {name}",
        name=f"list_{policy.kind}_{name}",
    )
