"""
Service API Routes
Authentication bootstrap and health endpoints that sit beside the resource routes
"""
import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from forge_mock import __version__
from forge_mock.core.config import get_settings
from forge_mock.core.exceptions import MalformedRequestError
from forge_mock.models import HealthResponse, LoginRequest, TokenResponse
from .resources import read_json_body

logger = logging.getLogger(__name__)

# Create API router
router = APIRouter()


@router.post("/auth/login",
             summary="Login",
             description="Exchange any credentials for the static mock token",
             response_model=TokenResponse,
             tags=["auth"])
async def login(request: Request):
    """Return the configured token; credentials are parsed but never checked"""
    credentials = LoginRequest()
    raw = await request.body()
    if raw.strip():
        try:
            credentials = LoginRequest.model_validate(await read_json_body(request))
        except ValidationError as e:
            raise MalformedRequestError(str(e))

    logger.info("Issued mock token", extra={"email": credentials.email})
    settings = getattr(request.app.state, "settings", None) or get_settings()
    return TokenResponse(access_token=settings.MOCK_ACCESS_TOKEN)


@router.get("/health",
            summary="Health Check",
            description="Check if the mock service is running",
            response_model=HealthResponse,
            tags=["health"])
async def health_check(request: Request):
    """Health check endpoint with stored entity counts"""
    stores = request.app.state.stores
    return HealthResponse(
        status="healthy",
        version=__version__,
        resources={kind: len(store) for kind, store in stores.items()},
    )
