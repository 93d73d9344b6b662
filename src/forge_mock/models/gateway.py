"""
Gateway Models

A gateway is a proxied upstream endpoint with pluggable authentication.
Create and update bodies are sent unwrapped; the same field set is used for
both, with ``name`` and ``url`` required only on create.
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from .common import ApiModel, Tag

AuthType = Literal["none", "basic", "bearer", "api_key", "oauth"]


class GatewayFields(ApiModel):
    """Caller-writable gateway fields."""

    description: Optional[str] = None
    transport: Optional[str] = None
    reachable: Optional[bool] = None
    capabilities: Optional[Dict[str, Any]] = None

    # Authentication
    passthrough_headers: Optional[List[str]] = None
    auth_type: Optional[AuthType] = None
    auth_username: Optional[str] = None
    auth_password: Optional[str] = None
    auth_token: Optional[str] = None
    auth_header_key: Optional[str] = None
    auth_header_value: Optional[str] = None
    auth_headers: Optional[List[Dict[str, str]]] = None
    auth_value: Optional[str] = None
    oauth_config: Optional[Dict[str, Any]] = None
    auth_query_param_key: Optional[str] = None
    auth_query_param_value: Optional[str] = None

    # Organizational
    tags: Optional[List[Tag]] = None
    team_id: Optional[str] = None
    team: Optional[str] = None
    owner_email: Optional[str] = None
    visibility: Optional[str] = None


class GatewayCreate(GatewayFields):
    """Unwrapped gateway creation body."""
    name: str = Field(..., description="Gateway name")
    url: str = Field(..., description="Upstream URL")


class GatewayUpdate(GatewayFields):
    """Partial gateway update; absent or null fields are left untouched."""
    name: Optional[str] = None
    url: Optional[str] = None


class Gateway(GatewayFields):
    """Stored gateway representation."""
    id: str
    name: str
    url: str
    enabled: bool = True
    tags: List[Tag] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
