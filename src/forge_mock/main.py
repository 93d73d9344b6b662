"""Main entry point for the forge mock service."""

import logging
from typing import Iterable, Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from forge_mock import __version__
from forge_mock.api import build_resource_router, router
from forge_mock.core.config import Settings, get_settings
from forge_mock.core.exceptions import (
    MalformedRequestError,
    MethodNotAllowedError,
    MockServiceError,
    ResourceNotFoundError,
)
from forge_mock.core.logging import get_logger, setup_logging
from forge_mock.core.policy import POLICIES, ResourcePolicy
from forge_mock.core.store import ResourceStore
from forge_mock.models import ErrorMessage
from forge_mock.rl import RateLimitHeadersMiddleware, create_rate_policy, get_rate_limit_config

logger = logging.getLogger(__name__)


async def mock_service_error_handler(request: Request, exc: MockServiceError):
    """Render service errors in the shape each failure kind uses"""
    log_extra = {
        "url": str(request.url),
        "method": request.method,
        "error_code": exc.error_code,
    }

    if isinstance(exc, ResourceNotFoundError):
        logger.warning("Resource not found", extra={**log_extra, "resource_id": exc.resource_id})
        return JSONResponse(status_code=exc.status_code, content=ErrorMessage(message=exc.message).model_dump())

    if isinstance(exc, (MalformedRequestError, MethodNotAllowedError)):
        logger.warning("Request rejected", extra={**log_extra, "error": exc.message})
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    logger.error("Mock service error", extra={**log_extra, "error": exc.message})
    return JSONResponse(status_code=exc.status_code, content=ErrorMessage(message=exc.message).model_dump())


async def routing_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render router-level 405s as plain text; defer everything else to FastAPI"""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        response = await mock_service_error_handler(
            request, MethodNotAllowedError(request.method, request.url.path)
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response
    return await http_exception_handler(request, exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Parameter validation failures are malformed requests"""
    return await mock_service_error_handler(request, MalformedRequestError(str(exc.errors())))


async def general_exception_handler(request: Request, exc: Exception):
    """General exception handler for unhandled errors"""
    logger.error(
        "Unhandled exception",
        extra={
            "url": str(request.url),
            "method": request.method,
            "error": str(exc)
        },
        exc_info=True
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error occurred"
        }
    )


def create_app(
    settings: Optional[Settings] = None,
    policies: Iterable[ResourcePolicy] = POLICIES,
) -> FastAPI:
    """Create and configure the FastAPI application with one store per resource kind."""
    settings = settings or get_settings()
    policies = tuple(policies)

    app = FastAPI(
        title="Forge Mock",
        description="In-memory mock of the gateway and server management API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check and stored entity counts"
            },
            {
                "name": "auth",
                "description": "Static token bootstrap"
            },
        ] + [
            {
                "name": policy.collection,
                "description": f"{policy.display_name} management"
            }
            for policy in policies
        ]
    )

    app.state.settings = settings
    app.state.stores = {
        policy.kind: ResourceStore(
            policy.kind,
            policy.entity_model,
            active_field=policy.active_field,
            display_name=policy.display_name,
        )
        for policy in policies
    }

    # Synthetic rate-limit headers on create responses
    app.add_middleware(
        RateLimitHeadersMiddleware,
        policy=create_rate_policy(get_rate_limit_config(settings)),
        apply_to_paths=tuple(policy.path for policy in policies)
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-RateLimit-Limit", "X-RateLimit-Remaining", "X-RateLimit-Reset"]
    )

    # Add custom exception handlers
    app.add_exception_handler(MockServiceError, mock_service_error_handler)
    app.add_exception_handler(StarletteHTTPException, routing_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include API routes
    app.include_router(router)
    for policy in policies:
        app.include_router(build_resource_router(policy))

    logger.info(
        "Mock service configured",
        extra={
            "resource_kinds": [policy.kind for policy in policies],
            "rate_limit_headers": settings.ENABLE_RATE_LIMIT_HEADERS,
            "log_level": settings.LOG_LEVEL
        }
    )

    return app


def main() -> None:
    """Main entry point for the application."""
    settings = get_settings()

    # Setup logging
    setup_logging(settings)
    log = get_logger(__name__)
    log.info("Starting forge mock", host=settings.HOST, port=settings.PORT)

    # Run the server
    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        log_config=None,
        access_log=True,
        server_header=False,
        date_header=True,
    )


if __name__ == "__main__":
    main()
