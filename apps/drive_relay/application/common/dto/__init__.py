"""Common DTOs."""

from apps.drive_relay.application.common.dto.stream import ByteStream

__all__ = ["ByteStream"]
