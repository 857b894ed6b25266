"""Common Ports."""

from apps.drive_relay.application.common.ports.rate_limiter import (
    RateLimiter,
    RateLimitStatus,
)

__all__ = ["RateLimiter", "RateLimitStatus"]
