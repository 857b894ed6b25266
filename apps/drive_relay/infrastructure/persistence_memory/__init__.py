"""Process-memory adapters (single instance)."""

from apps.drive_relay.infrastructure.persistence_memory.rate_limiter_memory import (
    InMemoryRateLimiter,
)
from apps.drive_relay.infrastructure.persistence_memory.session_store_memory import (
    InMemorySessionStore,
)

__all__ = ["InMemoryRateLimiter", "InMemorySessionStore"]
