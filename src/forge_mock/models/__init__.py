"""
API Models package

Contains Pydantic models for the mock resource service:
- common: shared base model, tags and small response bodies
- gateway: gateway create/update/stored models
- server: server create/update/stored models
- catalog: fixed association reference data for servers
"""

from .common import (
    ApiModel,
    Tag,
    ErrorMessage,
    LoginRequest,
    TokenResponse,
    HealthResponse,
)
from .gateway import AuthType, Gateway, GatewayCreate, GatewayUpdate
from .server import Server, ServerCreate, ServerUpdate
from .catalog import Tool, Resource, Prompt, PromptArgument, SERVER_ASSOCIATIONS

__all__ = [
    # Common models
    "ApiModel",
    "Tag",
    "ErrorMessage",
    "LoginRequest",
    "TokenResponse",
    "HealthResponse",
    # Gateway models
    "AuthType",
    "Gateway",
    "GatewayCreate",
    "GatewayUpdate",
    # Server models
    "Server",
    "ServerCreate",
    "ServerUpdate",
    # Association reference data
    "Tool",
    "Resource",
    "Prompt",
    "PromptArgument",
    "SERVER_ASSOCIATIONS",
]
