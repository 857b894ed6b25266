"""Drive DTOs."""

from apps.drive_relay.application.drive.dto.file_info import (
    DriveFileInfo,
    FileDownload,
    FileInfoResult,
)

__all__ = ["DriveFileInfo", "FileDownload", "FileInfoResult"]
