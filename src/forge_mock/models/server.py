"""
Server Models

A server aggregates tools, resources and prompts for clients. Creation is
wrapped in a ``{"server": {...}}`` envelope using snake_case names; updates
are unwrapped and use camelCase. Both spellings are accepted on input.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import ApiModel, Tag


class ServerFields(ApiModel):
    """Caller-writable server fields."""

    description: Optional[str] = None
    icon: Optional[str] = None
    tags: Optional[List[Tag]] = None

    associated_tools: Optional[List[str]] = None
    associated_resources: Optional[List[str]] = None
    associated_prompts: Optional[List[str]] = None
    associated_a2a_agents: Optional[List[str]] = Field(default=None, alias="associatedA2aAgents")

    team_id: Optional[str] = None
    owner_email: Optional[str] = None
    visibility: Optional[str] = None


class ServerCreate(ServerFields):
    """Inner body of a server creation request."""
    name: str = Field(..., description="Server name")


class ServerUpdate(ServerFields):
    """Partial server update; absent or null fields are left untouched."""
    name: Optional[str] = None


class Server(ServerFields):
    """Stored server representation."""
    id: str
    name: str
    is_active: bool = True
    tags: List[Tag] = Field(default_factory=list)
    team: Optional[str] = None
    created_at: datetime
    updated_at: datetime
