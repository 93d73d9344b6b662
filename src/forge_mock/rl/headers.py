"""Synthetic rate-limit header construction."""

import time
from dataclasses import dataclass
from typing import Dict, Optional

LIMIT_HEADER = "X-RateLimit-Limit"
REMAINING_HEADER = "X-RateLimit-Remaining"
RESET_HEADER = "X-RateLimit-Reset"


@dataclass(frozen=True)
class RatePolicy:
    """Advertised rate-limit figures. Nothing is actually counted."""
    limit: int = 1000
    cost: int = 5
    reset_seconds: int = 3600

    @property
    def remaining(self) -> int:
        return max(self.limit - self.cost, 0)


def build_rate_limit_headers(policy: RatePolicy, now: Optional[float] = None) -> Dict[str, str]:
    """
    Build X-RateLimit-* headers for a create response.

    Remaining is always ``limit - cost``; reset is ``now + reset_seconds``
    as integer epoch seconds.
    """
    if now is None:
        now = time.time()
    return {
        LIMIT_HEADER: str(policy.limit),
        REMAINING_HEADER: str(policy.remaining),
        RESET_HEADER: str(int(now) + policy.reset_seconds),
    }
