"""Core module: configuration, logging, errors, storage and resource policies."""

from .exceptions import (
    MockServiceError,
    MalformedRequestError,
    ResourceNotFoundError,
    MethodNotAllowedError,
)
from .store import ResourceStore
from .policy import ResourcePolicy, GATEWAY_POLICY, SERVER_POLICY, POLICIES

__all__ = [
    "MockServiceError",
    "MalformedRequestError",
    "ResourceNotFoundError",
    "MethodNotAllowedError",
    "ResourceStore",
    "ResourcePolicy",
    "GATEWAY_POLICY",
    "SERVER_POLICY",
    "POLICIES",
]
