"""Drive exceptions."""

from apps.drive_relay.application.drive.exceptions.drive import (
    DriveAccessDeniedError,
    DriveApiError,
    DriveFileNotFoundError,
    DriveNotConfiguredError,
    FileTooLargeError,
)

__all__ = [
    "DriveAccessDeniedError",
    "DriveApiError",
    "DriveFileNotFoundError",
    "DriveNotConfiguredError",
    "FileTooLargeError",
]
