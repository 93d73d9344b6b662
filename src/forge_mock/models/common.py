"""
Common API Models

Shared Pydantic models used by every resource kind: the camelCase base
model, tags, and the small response bodies for errors and login.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model emitting camelCase JSON while accepting either naming style."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json(self) -> Dict[str, Any]:
        """Serialize with API field names, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Tag(BaseModel):
    """
    Resource tag.

    Accepts ``"name"`` or ``{"id": ..., "label": ...}`` and always serializes
    back to the plain ``"name"`` form.
    """

    id: str = Field(..., min_length=1, description="Tag identifier")
    label: str = Field(..., description="Display label")

    @model_validator(mode="before")
    @classmethod
    def coerce_plain_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"id": value, "label": value}
        if isinstance(value, dict) and "id" in value and "label" not in value:
            return {**value, "label": value["id"]}
        return value

    @model_serializer
    def serialize_as_id(self) -> str:
        return self.id


class ErrorMessage(BaseModel):
    """Structured error body returned for unknown identifiers."""
    message: str = Field(..., description="Error message")


class LoginRequest(BaseModel):
    """Credentials posted to /auth/login. Never checked."""
    email: Optional[str] = Field(default=None, description="Account email")
    password: Optional[str] = Field(default=None, description="Account password")


class TokenResponse(BaseModel):
    """Static bearer token handed out by the mock."""
    access_token: str = Field(..., description="Bearer token")
    token_type: str = Field(default="bearer", description="Token type")


class HealthResponse(BaseModel):
    """Health check response format."""
    status: str = Field(..., description="Service health status")
    version: str = Field(..., description="Service version")
    resources: Dict[str, int] = Field(default_factory=dict, description="Stored entity count per kind")


__all__ = [
    "ApiModel",
    "Tag",
    "ErrorMessage",
    "LoginRequest",
    "TokenResponse",
    "HealthResponse",
]
