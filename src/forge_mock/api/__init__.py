"""
API package for the forge mock service

Contains FastAPI routers:
- resources: per-kind CRUD, toggle and association routes built from policies
- routes: authentication bootstrap and health endpoints
"""

from .resources import build_resource_router, read_json_body
from .routes import router

__all__ = [
    "build_resource_router",
    "read_json_body",
    "router",
]
