"""Drive queries."""

from apps.drive_relay.application.drive.queries.download import DownloadFileQuery
from apps.drive_relay.application.drive.queries.file_info import GetFileInfoQuery

__all__ = ["DownloadFileQuery", "GetFileInfoQuery"]
