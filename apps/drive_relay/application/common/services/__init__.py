"""Common Application Services."""

from apps.drive_relay.application.common.services.stream_limiter import (
    MAX_PAYLOAD_BYTES,
    limit_chunks,
    relay_limited,
)

__all__ = ["MAX_PAYLOAD_BYTES", "limit_chunks", "relay_limited"]
