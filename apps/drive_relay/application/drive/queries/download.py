"""DownloadFile Query.

메타데이터로 크기를 먼저 확인한 뒤 본문 스트림을 엽니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.drive_relay.application.common.services import MAX_PAYLOAD_BYTES
from apps.drive_relay.application.drive.dto import FileDownload
from apps.drive_relay.application.drive.exceptions import (
    DriveNotConfiguredError,
    FileTooLargeError,
)
from apps.drive_relay.domain.services import resolve_content_type
from apps.drive_relay.domain.value_objects import FileId

if TYPE_CHECKING:
    from apps.drive_relay.application.drive.ports import DriveGateway

logger = logging.getLogger(__name__)


class DownloadFileQuery:
    """파일 다운로드 Query.

    선언 크기가 상한을 넘으면 스트림을 열지 않고 거부합니다.
    선언 크기가 없거나 틀린 경우는 중계 단계의 바이트 카운터가 막습니다.
    """

    def __init__(self, drive: "DriveGateway", max_bytes: int = MAX_PAYLOAD_BYTES) -> None:
        self._drive = drive
        self._max_bytes = max_bytes

    async def execute(self, raw_file_id: str) -> FileDownload:
        """
        Raises:
            InvalidFileIdError: ID 형식 오류
            DriveNotConfiguredError: 자격 증명 미설정
            FileTooLargeError: 선언 크기 상한 초과
        """
        file_id = FileId(raw_file_id)

        if not self._drive.is_configured():
            raise DriveNotConfiguredError()

        info = await self._drive.get_file_info(file_id.value)

        if info.size is not None and info.size > self._max_bytes:
            logger.warning(
                "Download rejected: declared size exceeds limit",
                extra={"file_id": info.id, "size": info.size, "max_bytes": self._max_bytes},
            )
            raise FileTooLargeError(info.size, self._max_bytes)

        stream = await self._drive.open_content(file_id.value)

        return FileDownload(
            info=info,
            content_type=resolve_content_type(info.mime_type),
            stream=stream,
        )
