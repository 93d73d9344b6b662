"""Middleware attaching synthetic rate-limit headers to create responses."""

import logging
from typing import Optional, Tuple

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from .headers import RatePolicy, build_rate_limit_headers

logger = logging.getLogger(__name__)


class RateLimitHeadersMiddleware(BaseHTTPMiddleware):
    """Add X-RateLimit-* headers to successful POSTs on collection paths."""

    def __init__(
        self,
        app,
        policy: Optional[RatePolicy] = None,
        apply_to_paths: Tuple[str, ...] = ("/gateways", "/servers"),
    ):
        """Initialize rate-limit header middleware."""
        super().__init__(app)
        self.policy = policy
        self.apply_to_paths = tuple(path.rstrip("/") for path in apply_to_paths)

        if self.policy is None:
            logger.info("Rate-limit header middleware initialized but disabled (no policy provided)")
        else:
            logger.info(
                "Rate-limit header middleware initialized",
                extra={
                    "apply_to_paths": self.apply_to_paths,
                    "policy_limit": self.policy.limit,
                    "policy_remaining": self.policy.remaining,
                }
            )

    async def dispatch(self, request: Request, call_next):
        """Attach headers to matching create responses."""
        response = await call_next(request)

        if self.policy is None or request.method != "POST":
            return response

        # Only the collection path itself is a create; /{id}/toggle is not
        if request.url.path.rstrip("/") not in self.apply_to_paths:
            return response

        if 200 <= response.status_code < 300:
            response.headers.update(build_rate_limit_headers(self.policy))
        return response
