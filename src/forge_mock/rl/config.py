"""Rate-limit header configuration and dependency injection."""

from typing import Optional

from pydantic import BaseModel, Field

from forge_mock.core.config import Settings, get_settings
from .headers import RatePolicy


class RateLimitConfig(BaseModel):
    """Rate-limit header configuration model."""

    enabled: bool = Field(default=True, description="Emit rate-limit headers")
    limit: int = Field(default=1000, ge=1, description="Advertised request limit")
    cost: int = Field(default=5, ge=0, description="Fixed decrement reported per create")
    reset_seconds: int = Field(default=3600, ge=1, le=86400, description="Seconds until advertised reset")


def get_rate_limit_config(settings: Optional[Settings] = None) -> RateLimitConfig:
    """Get rate-limit header configuration from settings."""
    settings = settings or get_settings()

    return RateLimitConfig(
        enabled=settings.ENABLE_RATE_LIMIT_HEADERS,
        limit=settings.RATE_LIMIT_LIMIT,
        cost=settings.RATE_LIMIT_COST,
        reset_seconds=settings.RATE_LIMIT_RESET_SECONDS,
    )


def create_rate_policy(config: Optional[RateLimitConfig] = None) -> Optional[RatePolicy]:
    """
    Create the advertised rate policy.

    Args:
        config: Rate-limit configuration (defaults to settings)

    Returns:
        RatePolicy instance or None if headers are disabled
    """
    if config is None:
        config = get_rate_limit_config()

    if not config.enabled:
        return None

    return RatePolicy(
        limit=config.limit,
        cost=config.cost,
        reset_seconds=config.reset_seconds,
    )
