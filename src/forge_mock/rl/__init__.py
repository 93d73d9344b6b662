"""Synthetic rate-limit header module."""

from .headers import (
    LIMIT_HEADER,
    REMAINING_HEADER,
    RESET_HEADER,
    RatePolicy,
    build_rate_limit_headers,
)
from .middleware import RateLimitHeadersMiddleware
from .config import RateLimitConfig, get_rate_limit_config, create_rate_policy

__all__ = [
    "LIMIT_HEADER",
    "REMAINING_HEADER",
    "RESET_HEADER",
    "RatePolicy",
    "build_rate_limit_headers",
    "RateLimitHeadersMiddleware",
    "RateLimitConfig",
    "get_rate_limit_config",
    "create_rate_policy",
]
