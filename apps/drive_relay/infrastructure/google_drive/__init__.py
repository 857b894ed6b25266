"""Google Drive adapters."""

from apps.drive_relay.infrastructure.google_drive.client import GoogleDriveClient
from apps.drive_relay.infrastructure.google_drive.credentials import (
    ServiceAccountTokenSource,
)

__all__ = ["GoogleDriveClient", "ServiceAccountTokenSource"]
