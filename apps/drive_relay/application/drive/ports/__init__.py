"""Drive ports."""

from apps.drive_relay.application.drive.ports.drive_gateway import DriveGateway

__all__ = ["DriveGateway"]
